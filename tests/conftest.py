import sys
from pathlib import Path

import pytest

# Ensure the project packages are importable during tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from timesheet_app.tracker.models import Row  # noqa: E402

SAMPLE_LOG = '''Task,Remark
website,implement email subscribe form
website,restore animation and youtube iframe in home page
image-ai-builder,exp: discuss rotation and zoom with elly
image-ai-builder,exp: implement way to drag to move/zoom bounding box
image-ai-builder,team: dev with elly
animal-ai,team: brief cat beard formula and image classify ai model training to sofia and lanna
animal-ai,team: discuss with benny and trevor on car beard direction calculation
,team: demo sofia and lanna on box model training with colab
,team: demo to lanna and sofia on colab box model training
,exp: try hammer js with elly to zoom in and rotate the bounding box
,"team: brief idmm dataset export, import, extract tasks to lok
 - pose -> pose (crop bounding box)
 - pose -> classify (crop box)"
'''


@pytest.fixture
def sample_log(tmp_path) -> Path:
    path = tmp_path / "log-sheet.csv"
    path.write_text(SAMPLE_LOG, encoding="utf-8")
    return path


@pytest.fixture
def labeled_rows():
    return [
        Row("website", "implement email subscribe form"),
        Row("animal-ai", "team: demo sofia and lanna on box model training"),
    ]
