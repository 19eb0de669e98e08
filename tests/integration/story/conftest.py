from pathlib import Path

import pytest

STORY_V1 = """:: StoryTitle
The Cave

:: StoryData
{"ifid": "5F1D-7A2C", "format": "Harlowe", "format-version": "3.3.8"}

:: Start [intro] {100,100}
You wake in a cave. [[Go North]] or [[Look|Examine Room]].

:: Go North {300,100}
It is cold here. [[Back->Start]]

:: Examine Room {100,300}
Dust and old bones.
"""

STORY_V2 = """:: StoryTitle
The Cave

:: StoryData
{"ifid": "5F1D-7A2C", "format": "Harlowe", "format-version": "3.3.8"}

:: Start [intro] {100,100}
You wake in a cave. [[Go North]]

:: Go North {300,100}
It is cold here. [[Back->Start]] [[Secret Door]]

:: Secret Door {500,100}
A draft whistles through the gap.
"""


@pytest.fixture
def story_dir(tmp_path: Path) -> Path:
    """Write both story versions to disk, as an editor import would see them."""
    (tmp_path / "cave_v1.twee").write_text(STORY_V1, encoding="utf-8")
    (tmp_path / "cave_v2.twee").write_text(STORY_V2, encoding="utf-8")
    return tmp_path


@pytest.fixture
def v1_bytes(story_dir: Path) -> bytes:
    return (story_dir / "cave_v1.twee").read_bytes()


@pytest.fixture
def v2_bytes(story_dir: Path) -> bytes:
    return (story_dir / "cave_v2.twee").read_bytes()
