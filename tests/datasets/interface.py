from pathlib import Path

_TEST_DATASET_ROOT: Path = Path(__file__).parent


def get_test_dataset_root() -> Path:
    return _TEST_DATASET_ROOT
