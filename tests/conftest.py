"""
Pytest configuration and fixtures for ArtifactScorer tests.
"""

import pytest


@pytest.fixture(scope="session")
def sample_config():
    """Return a default ScorerConfig for testing."""
    from artifactscorer import ScorerConfig

    return ScorerConfig()


@pytest.fixture(scope="session")
def sample_block() -> str:
    """OCR output for a typical four-substat artifact, as Tesseract returns it."""
    return "会心率+⑦.⑧%\n会心ダメージ+②①.0%\n攻撃カ+⑤.⑧%\n元素チャージ効率+⑥.5%\n"


@pytest.fixture
def make_substat():
    """Factory building a Substat from a type and a value."""
    from artifactscorer import ParamKind, Substat, SubstatParam, SubstatType

    actual_types = {SubstatType.ATK_ACT, SubstatType.DEF_ACT, SubstatType.HP_ACT}

    def _make(substat_type, value, status_name="stat"):
        kind = ParamKind.ACTUAL if substat_type in actual_types else ParamKind.PERCENT
        label = f"{value}%" if kind is ParamKind.PERCENT else f"{value}"
        return Substat(
            type=substat_type,
            status_name=status_name,
            param=SubstatParam(label=label, kind=kind, value=float(value)),
        )

    return _make
