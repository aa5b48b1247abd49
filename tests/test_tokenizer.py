from timesheet_app.ml.tokenizer import tokenize


def test_tokenize_strips_symbols_and_stop_words():
    words = tokenize("team: brief (crop box) to lok, is it done?")
    assert words == ["team:", "brief", "crop", "box", "lok", "it", "done"]


def test_tokenize_multiline_and_duplicates():
    remark = "pose -> pose\n - classify  box\tbox"
    assert tokenize(remark) == ["pose", ">", "pose", "classify", "box", "box"]


def test_tokenize_removes_symbols_inside_words():
    assert tokenize("re-run v1.2") == ["rerun", "v12"]


def test_tokenize_stop_words_are_case_sensitive():
    assert tokenize("The the AND and") == ["The", "AND"]


def test_tokenize_empty_inputs():
    assert tokenize("") == []
    assert tokenize("   \n ") == []
    assert tokenize("the of on") == []
    assert tokenize("- ... ?") == []
