from okazje.table.collation import POLISH_ALPHABET, polish_collator


def _sorted(words):
    return sorted(words, key=polish_collator.sort_key)


def test_polish_alphabet_order():
    letters = list(POLISH_ALPHABET)
    assert _sorted(reversed(letters)) == letters


def test_diacritic_letters_sit_after_their_base():
    assert _sorted(["źle", "zero", "żaba", "zdanie"]) == ["zdanie", "zero", "źle", "żaba"]
    assert _sorted(["łąka", "lody", "mleko"]) == ["lody", "łąka", "mleko"]


def test_case_is_a_tertiary_difference():
    assert _sorted(["Ala", "ala", "alb"]) == ["ala", "Ala", "alb"]


def test_foreign_accents_are_secondary():
    assert _sorted(["cafe", "café", "cafd"]) == ["cafd", "cafe", "café"]


def test_digits_before_letters_and_spaces_first():
    assert _sorted(["b", "1a", "a b", "ab"]) == ["1a", "a b", "ab", "b"]


def test_compare_is_three_way():
    assert polish_collator.compare("Ćma", "Abak") == 1
    assert polish_collator.compare("Abak", "Ćma") == -1
    assert polish_collator.compare("Żaba", "Żaba") == 0
