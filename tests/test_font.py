from psxfunk.font import FontAlign, Glyph, bold_layout, bold_width


def test_width_is_additive():
    assert bold_width("") == 0
    assert bold_width("AB") + bold_width("CD") == bold_width("ABCD")
    assert bold_width("A") == 13


def test_first_letter_glyph():
    assert bold_layout("A", 10, 5) == [Glyph(0, 0, 14, 16, 10, 5)]


def test_repeated_letter_alternates_variant():
    glyphs = bold_layout("AA", 0, 0)
    assert glyphs[0].src_x == 0
    assert glyphs[1].src_x == 14
    assert glyphs[1].x - glyphs[0].x == 13


def test_animation_flips_variant():
    plain = bold_layout("A", 0, 0, animf_count=0)
    flipped = bold_layout("A", 0, 0, animf_count=2)
    assert flipped[0].src_x == plain[0].src_x + 14
    assert bold_layout("A", 0, 0, animf_count=1) == plain


def test_non_letters_advance_without_glyph():
    glyphs = bold_layout(" A{0", 0, 0)
    assert len(glyphs) == 1
    assert glyphs[0].x == 13


def test_lowercase_uses_lower_rows():
    upper = bold_layout("A", 0, 0)[0]
    lower = bold_layout("a", 0, 0)[0]
    assert lower.src_y > upper.src_y
    assert lower.src_x == upper.src_x


def test_lowercase_shares_variant_with_uppercase():
    glyphs = bold_layout("Aa", 0, 0)
    assert glyphs[1].src_x == glyphs[0].src_x + 14


def test_alignment_offsets():
    text = "HELLO"
    left = bold_layout(text, 100, 0, FontAlign.LEFT)
    centre = bold_layout(text, 100, 0, FontAlign.CENTER)
    right = bold_layout(text, 100, 0, FontAlign.RIGHT)
    width = bold_width(text)
    assert [g.x for g in centre] == [g.x - (width >> 1) for g in left]
    assert [g.x for g in right] == [g.x - width for g in left]
    assert right[-1].x + 13 == 100