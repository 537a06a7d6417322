import pytest


@pytest.fixture
def temp_workspace(tmp_path):
    """Create a temporary workspace directory"""
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return workspace


@pytest.fixture
def sample_script():
    """Script mixing escape clauses, literals and comments"""
    return (
        "-- nightly report\n"
        "SELECT {fn UCASE(name)} FROM users WHERE note = 'a;b';\n"
        "{? = call refresh_stats(?)};\n"
        "SELECT * FROM {oj a LEFT OUTER JOIN b ON a.id = b.id};\n"
    )


class RecordingEngine:
    """Query engine double that records every statement it prepares"""

    def __init__(self) -> None:
        self.prepared: list[str] = []

    def prepare(self, sql: str) -> dict[str, str]:
        self.prepared.append(sql)
        return {"sql": sql}


@pytest.fixture
def engine():
    return RecordingEngine()
