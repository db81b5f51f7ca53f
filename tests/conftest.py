"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local gotestreport package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of gotestreport modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("gotestreport"):
        del sys.modules[module_name]


# =============================================================================
# Sample go test output
# =============================================================================

CREATE_LOG = [
    "2019/05/20 10:00:00 [WARN] Test: Step plan: DIFF:",
    "CREATE: aws_instance.foo",
    "2019/05/20 10:00:01 [INFO] terraform: building graph: GraphTypeApply",
    "2019/05/20 10:00:11 [INFO] terraform: building graph: GraphTypePlan",
]

DESTROY_LOG = [
    "2019/05/20 10:00:20 [WARN] Test: Executing destroy step",
    "2019/05/20 10:00:21 [WARN] Test: Step plan: DIFF:",
    "DESTROY: aws_instance.foo",
    "2019/05/20 10:00:22 [INFO] terraform: building graph: GraphTypeApply",
    "2019/05/20 10:00:27 [INFO] terraform: building graph: GraphTypePlanDestroy",
]

ACCEPTANCE_RUN = "\n".join(
    [
        "=== RUN   TestAccInstance_basic",
        *CREATE_LOG,
        *DESTROY_LOG,
        "--- PASS: TestAccInstance_basic (30.00s)",
        "PASS",
        "ok  \tgithub.com/acme/provider/aws\t30.012s",
        "",
    ]
)

MIXED_RUN = "\n".join(
    [
        "=== RUN   TestPass",
        "--- PASS: TestPass (0.50s)",
        "=== RUN   TestFail",
        "    \tfoo_test.go:12: expected 1, got 2",
        "--- FAIL: TestFail (0.25s)",
        "=== RUN   TestSkip",
        "--- SKIP: TestSkip (0.00s)",
        "    \tfoo_test.go:20: needs credentials",
        "FAIL",
        "exit status 1",
        "FAIL\tgithub.com/acme/provider/foo\t0.760s",
        "",
    ]
)


@pytest.fixture
def acceptance_run() -> str:
    return ACCEPTANCE_RUN


@pytest.fixture
def mixed_run() -> str:
    return MIXED_RUN


@pytest.fixture
def create_log() -> list[str]:
    return list(CREATE_LOG)


@pytest.fixture
def destroy_log() -> list[str]:
    return list(DESTROY_LOG)
