from app.render.layout import Segment, layout_dish, rule, split_name
from app.render.style import render_segments

def _plain(segments):
    return render_segments(segments, color=False)

class TestSplitName:
    """Unit tests for dish name wrapping"""

    def test_short_name_is_not_wrapped(self):
        assert split_name("Linsensuppe", "1.9€", 80) == ("Linsensuppe", "")

    def test_long_name_wraps_after_available_space(self):
        name = "x" * 90
        head, tail = split_name(name, "2.5€ ", 80)
        avail = 80 - (5 + 1)
        assert head == name[:avail]
        assert len(tail) == len(name) - avail
        assert tail

    def test_name_filling_the_line_exactly_wraps(self):
        # name + price == width leaves no room for the separating space
        head, tail = split_name("a" * 76, "1.9€", 80)
        assert head == "a" * 75
        assert tail == "a"

    def test_price_wider_than_line_moves_whole_name(self):
        head, tail = split_name("Suppe", "9" * 100, 80)
        assert head == ""
        assert tail == "Suppe"

class TestLayoutDish:
    """Unit tests for single dish layout"""

    def test_single_line_fills_width(self):
        text = _plain(layout_dish("Linsensuppe", "1.9€", "veg", 80))
        first, labels, end = text.split("\n")
        assert len(first) == 80
        assert first.startswith("Linsensuppe ")
        assert first.endswith(" 1.9€")
        assert labels == "veg"
        assert end == ""

    def test_padding_is_at_least_one_space(self):
        text = _plain(layout_dish("Eintopf", "1€", "", 5))
        assert text == "Ei 1€\nntopf\n\n"

    def test_wrapped_name_continues_on_second_line(self):
        name = "Schweinebraten mit Kartoffelknödel, Blaukraut und dunkler Biersoße nach Art des Hauses"
        segments = layout_dish(name, "5.5€", "🐷 🌾", 80)
        lines = _plain(segments).split("\n")
        assert len(lines[0]) == 80
        assert lines[0].endswith(" 5.5€")
        assert lines[0][:-5] + lines[1] == name
        assert lines[2] == "🐷 🌾"

    def test_tail_is_styled_as_name(self):
        segments = layout_dish("y" * 90, "1€", "", 80)
        styled = [s for s in segments if s.style == "name"]
        assert len(styled) == 2
        assert "".join(s.text for s in styled).rstrip("\n") == "y" * 90

    def test_no_labels_yields_empty_label_line(self):
        text = _plain(layout_dish("Reis", "0.8€", "", 80))
        assert text.endswith("0.8€\n\n")

    def test_segment_styles(self):
        segments = layout_dish("Reis", "0.8€", "veg", 20)
        assert segments[0] == Segment("Reis", "name")
        assert segments[2] == Segment("0.8€", "price")

class TestRuleAndStyle:
    """Unit tests for the separator rule and ANSI rendering"""

    def test_rule_width(self):
        line = rule(80).text
        assert line == "─" * 79 + "┘\n"
        assert rule(80).style == "rule"

    def test_plain_render_has_no_escape_codes(self):
        text = render_segments([Segment("Reis", "name"), Segment(" "), Segment("1€", "price")], color=False)
        assert text == "Reis 1€"

    def test_color_render_wraps_styled_segments(self):
        text = render_segments([Segment("Reis", "name"), Segment(" ")], color=True)
        assert text.startswith("\x1b[1mReis")
        assert text.endswith("\x1b[0m ")
