import pytest
from errors import MediumError
from medium import RemovableMedium
from status.codes import StatusCode
from conftest import FakeRunner

async def test_mount_creates_point_and_mounts(paths):
    runner = FakeRunner()
    await RemovableMedium(runner, paths).mount()
    assert paths.mount_point.is_dir()
    assert runner.calls == [
        ("mount", ("/bin/mount", "-t", "vfat", "/dev/sda1",
                   str(paths.mount_point))),
    ]

async def test_mount_failure_means_no_config(paths):
    with pytest.raises(MediumError) as exc:
        await RemovableMedium(FakeRunner(fail={"mount"}), paths).mount()
    assert exc.value.status is StatusCode.NO_CONFIG

async def test_mkdir_failure_is_generic_error(paths, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    from dataclasses import replace
    bad = replace(paths, mount_point=blocker / "mnt")
    runner = FakeRunner()
    with pytest.raises(MediumError) as exc:
        await RemovableMedium(runner, bad).mount()
    assert exc.value.status is StatusCode.ERROR
    assert runner.calls == []

async def test_unmount_failure_does_not_raise(paths):
    runner = FakeRunner(fail={"umount"})
    await RemovableMedium(runner, paths).unmount()
    assert runner.tags == ["umount"]
