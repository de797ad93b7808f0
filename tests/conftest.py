import sys, os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from config import AgentPaths, Timings
from network.runner import ActionRecord
from settings import ProvisioningSettings
from status.channel import StatusChannel
from status.controller import SignalContext

ZERO_TIMINGS = Timings(
    blink_on=0, blink_off=0, blink_idle=0, settle=0, fatal_hold=0,
)


class FakeIndicator:
    def __init__(self):
        self.events = []

    def setup(self):
        self.events.append("setup")

    def on(self):
        self.events.append("on")

    def off(self):
        self.events.append("off")


class FakeRunner:
    """Stands in for CommandRunner; tags listed in `fail` exit 1."""

    def __init__(self, fail=(), outputs=None):
        self.fail = set(fail)
        self.outputs = outputs or {}
        self.calls = []

    @property
    def tags(self):
        return [tag for tag, _ in self.calls]

    async def run(self, tag, argv):
        argv = tuple(argv)
        self.calls.append((tag, argv))
        if tag in self.fail:
            return ActionRecord(tag=tag, argv=argv, output=f"{tag} broke\n",
                                error="exit status 1")
        return ActionRecord(tag=tag, argv=argv,
                            output=self.outputs.get(tag, f"{tag} fine\n"))


@pytest.fixture
def settings():
    return ProvisioningSettings()

@pytest.fixture
def indicator():
    return FakeIndicator()

@pytest.fixture
def exits():
    return []

@pytest.fixture
def ctx(indicator, exits):
    return SignalContext(
        channel=StatusChannel(3),
        indicator=indicator,
        timings=ZERO_TIMINGS,
        exit=exits.append,
    )

@pytest.fixture
def paths(tmp_path):
    (tmp_path / "etc").mkdir()
    (tmp_path / "root").mkdir()
    return AgentPaths(
        mount_point=tmp_path / "mnt",
        interfaces=tmp_path / "etc" / "interfaces",
        root=tmp_path / "root",
        led_dir=tmp_path / "led0",
        ipv6_conf_dir=tmp_path / "ipv6",
    )

@pytest.fixture
def timings():
    return ZERO_TIMINGS


def drain(channel):
    """Everything posted so far, in order."""
    codes = []
    while True:
        code = channel.poll()
        if code is None:
            return codes
        codes.append(code)
