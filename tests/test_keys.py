from gatus_snitcher.keys import TIMER_PREFIX, derive_key, sanitize, timer_variable


def test_sanitize_replaces_every_reserved_character():
    assert sanitize("a b/c_d,e.f#g") == "a-b-c-d-e-f-g"


def test_sanitize_leaves_other_characters():
    assert sanitize("Api-Test:1") == "Api-Test:1"


def test_derive_key():
    assert derive_key("core ext", "api.test") == "core-ext_api-test"
    assert derive_key("ci", "nightly") == "ci_nightly"


def test_timer_variable_from_key():
    key = derive_key("core ext", "api.test")
    assert timer_variable(key) == "GATUS_SNITCHER_START_CORE_EXT_API_TEST"


def test_timer_variable_is_deterministic():
    assert timer_variable(derive_key("g", "n")) == timer_variable(derive_key("g", "n"))


def test_timer_id_changes_variable_independently():
    first = timer_variable("build")
    second = timer_variable("deploy")
    assert first != second
    assert first == TIMER_PREFIX + "BUILD"
    assert timer_variable("my.timer#1") == TIMER_PREFIX + "MY_TIMER_1"
