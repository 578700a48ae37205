"""Tests for BoxService."""

from __future__ import annotations

from drillctl.config.models import BoxConfig
from drillctl.config.settings import DrillSettings
from drillctl.domain.box import LockedBox
from drillctl.services.box import BoxService


class TestStash:
    def test_stash_relocks(self, settings: DrillSettings) -> None:
        service = BoxService(settings)
        result = service.stash(["gold piece"])
        assert result.ok
        assert result.data["stashed"] == 1
        assert result.data["items"] == ["gold piece"]
        assert result.data["locked"] is True
        assert service.box.locked is True

    def test_failed_stash_relocks_and_reports(self, settings: DrillSettings) -> None:
        service = BoxService(settings)
        result = service.stash(["gold piece"], fail_with="Pirates on the horizon! Abort!")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "ABORTED"
        assert result.error.message == "Pirates on the horizon! Abort!"
        assert result.error.detail["locked"] is True
        assert service.box.locked is True

    def test_failed_stash_keeps_partial_mutation(self, settings: DrillSettings) -> None:
        service = BoxService(settings)
        service.stash(["gold piece"], fail_with="abort")
        assert service.peek().data["items"] == ["gold piece"]

    def test_uses_configured_contents(self, settings: DrillSettings) -> None:
        custom = settings.model_copy(update={"box": BoxConfig(contents=["map"])})
        result = BoxService(custom).stash(["compass"])
        assert result.data["items"] == ["map", "compass"]


class TestPeekAndInspect:
    def test_peek(self, settings: DrillSettings) -> None:
        box = LockedBox(["coin"])
        result = BoxService(settings, box=box).peek()
        assert result.ok
        assert result.data == {"count": 1, "items": ["coin"], "locked": True}

    def test_inspect_denied_when_locked(self, settings: DrillSettings) -> None:
        result = BoxService(settings).inspect()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "ACCESS_DENIED"

    def test_inspect_allowed_when_unlocked(self, settings: DrillSettings) -> None:
        box = LockedBox(["coin"])
        box.unlock()
        result = BoxService(settings, box=box).inspect()
        assert result.ok
        assert result.data["locked"] is False
