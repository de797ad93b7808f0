import logging
import logging.handlers
import os
import sys

LOG_FILE = "/var/log/rpac.log"
SYSLOG_SOCKET = "/dev/log"

def setup_logger() -> logging.Logger:
    logger = logging.getLogger("rpac")
    logger.setLevel(logging.DEBUG)

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
    )

    # Try to write to log file; fall back to /tmp if /var/log not writable
    try:
        fh = logging.FileHandler(LOG_FILE)
    except OSError:
        fh = logging.FileHandler("/tmp/rpac.log")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)

    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(logging.WARNING)
    sh.setFormatter(fmt)

    if not logger.handlers:
        logger.addHandler(fh)
        logger.addHandler(sh)
        # No console on the device, syslog is what survives a reboot
        if os.path.exists(SYSLOG_SOCKET):
            try:
                syslog = logging.handlers.SysLogHandler(address=SYSLOG_SOCKET)
            except OSError:
                syslog = None
            if syslog is not None:
                syslog.setLevel(logging.INFO)
                syslog.setFormatter(logging.Formatter("rpac: %(message)s"))
                logger.addHandler(syslog)
    return logger

log = setup_logger()
