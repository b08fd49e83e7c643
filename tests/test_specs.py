from pepsmiles.specs import CROSS_LINK_SPEC, CYCLIZATION_SPEC, OPTION_SPECS, normalize_option
from pepsmiles.errors import InputError


def test_option_specs_registered():
    assert OPTION_SPECS["cyclization"] is CYCLIZATION_SPEC
    assert OPTION_SPECS["cross-link"] is CROSS_LINK_SPEC


def test_normalize_cyclization_default():
    assert normalize_option(CYCLIZATION_SPEC, None) == "none"
    assert normalize_option(CYCLIZATION_SPEC, "") == "none"


def test_normalize_aliases():
    assert normalize_option(CYCLIZATION_SPEC, " Head_To_Tail ") == "head-to-tail"
    assert normalize_option(CYCLIZATION_SPEC, "cyclic") == "head-to-tail"
    assert normalize_option(CROSS_LINK_SPEC, "Disulfide") == "cystine"
    assert normalize_option(CROSS_LINK_SPEC, "MeLan") == "melan"


def test_normalize_cross_link_requires_value():
    try:
        normalize_option(CROSS_LINK_SPEC, None)
    except InputError:
        return
    raise AssertionError("Expected InputError for missing cross-link kind")


def test_normalize_invalid():
    try:
        normalize_option(CYCLIZATION_SPEC, "side-chain")
    except InputError as e:
        assert "Unsupported cyclization" in str(e)
        return
    raise AssertionError("Expected InputError for invalid cyclization")
