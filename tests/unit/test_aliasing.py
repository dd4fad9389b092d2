from ajax_api.helpers.aliasing import aliasing, anti_aliasing, flip_aliases


def test_aliasing_renames_present_keys():
    data = {"ContactLogModal": {"subject": "Hi"}, "Contact": {"name": "Ann"}}

    result = aliasing({"ContactLogModal": "ContactLog"}, data)

    assert result == {"ContactLog": {"subject": "Hi"}, "Contact": {"name": "Ann"}}


def test_aliasing_does_not_mutate_input():
    data = {"A": 1}
    aliasing({"A": "B"}, data)
    assert data == {"A": 1}


def test_aliasing_skips_missing_alias():
    assert aliasing({"Missing": "Actual"}, {"Other": 1}) == {"Other": 1}


def test_aliasing_overwrites_existing_actual_key():
    assert aliasing({"A": "B"}, {"A": "new", "B": "old"}) == {"B": "new"}


def test_aliasing_last_applied_alias_wins():
    aliases = {"First": "Target", "Second": "Target"}
    assert aliasing(aliases, {"First": 1, "Second": 2}) == {"Target": 2}


def test_aliasing_same_name_keeps_value():
    assert aliasing({"A": "A"}, {"A": 1}) == {"A": 1}


def test_flip_aliases_later_duplicate_wins():
    assert flip_aliases({"x": "Model", "y": "Model"}) == {"Model": "y"}


def test_anti_aliasing_inverts_aliasing():
    aliases = {"ContactLogModal": "ContactLog", "PersonForm": "Contact"}
    data = {"ContactLogModal": {"subject": "Hi"}, "PersonForm": {"name": "Ann"}, "Note": "x"}

    assert anti_aliasing(aliases, aliasing(aliases, data)) == data
