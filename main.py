import asyncio
import os, sys

def main():
    if os.geteuid() != 0:
        print("ERROR: rpac must be run as root.", file=sys.stderr)
        sys.exit(1)
    from app import ProvisioningAgent
    asyncio.run(ProvisioningAgent().run())
    # Only reached if the blink loop ever returns
    sys.exit(0)

if __name__ == "__main__":
    main()
