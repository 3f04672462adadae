from rich.text import Text

from circletree import Canvas


def test_blank_canvas_renders_only_newlines():
    assert Canvas(5, 3).render() == "\n\n\n"


def test_rows_are_trimmed_on_the_right():
    canvas = Canvas(10, 2)
    canvas.write_text(2, 0, "ab  ")
    assert canvas.render() == "  ab\n\n"


def test_out_of_bounds_writes_are_clipped():
    canvas = Canvas(4, 2)
    assert canvas.set(-1, 0, "x") is False
    assert canvas.set(0, 2, "x") is False
    assert canvas.set(4, 1, "x") is False
    assert canvas.write_text(-2, 0, "abcdef") == [0, 1, 2, 3]
    assert canvas.render() == "cdef\n\n"


def test_wide_characters_take_two_cells():
    canvas = Canvas(6, 1)
    canvas.write_text(0, 0, "日x")
    assert canvas.cell_widths[0][:3] == [2, 0, 1]
    assert canvas.get(1, 0) == " "
    assert canvas.render() == "日x\n"


def test_overwriting_half_of_a_wide_character_clears_it():
    canvas = Canvas(6, 1)
    canvas.write_text(0, 0, "日")
    canvas.set(1, 0, "|")
    assert canvas.render() == " |\n"


def test_wide_character_at_edge_is_dropped():
    canvas = Canvas(3, 1)
    assert canvas.write_text(2, 0, "日") == []
    assert canvas.render() == "\n"


def test_markup_is_escaped_around_tags():
    canvas = Canvas(6, 1)
    canvas.write_text(0, 0, "[a]\\")
    canvas.insert_markup(3, 0, "[cyan]", position="prefix")
    canvas.insert_markup(3, 0, "[/]", position="suffix")
    markup = canvas.render(include_markup=True)
    assert Text.from_markup(markup).plain == "[a]\\\n"


def test_backslash_pair_before_tag_survives_markup():
    canvas = Canvas(6, 1)
    canvas.write_text(0, 0, "a\\\\b")
    canvas.insert_markup(3, 0, "[red]", position="prefix")
    canvas.insert_markup(3, 0, "[/]", position="suffix")
    markup = canvas.render(include_markup=True)
    assert Text.from_markup(markup).plain == "a\\\\b\n"


def test_trailing_backslash_without_tag_survives_markup():
    canvas = Canvas(4, 1)
    canvas.write_text(0, 0, "a\\")
    assert Text.from_markup(canvas.render(include_markup=True)).plain == "a\\\n"


def test_markup_is_ignored_for_plain_render():
    canvas = Canvas(3, 1)
    canvas.set(0, 0, "x")
    canvas.insert_markup(0, 0, "[red]")
    canvas.insert_markup(0, 0, "[/]", position="suffix")
    assert canvas.render() == "x\n"


def test_backslash_before_bare_bracket_survives_markup():
    canvas = Canvas(12, 1)
    canvas.write_text(0, 0, "\\[a] \\\\[x")
    markup = canvas.render(include_markup=True)
    assert Text.from_markup(markup).plain == "\\[a] \\\\[x\n"
