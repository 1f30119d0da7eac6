import random

import pytest

from roomhub import fake_data


def test_company_name_is_short_label():
    rng = random.Random(1)
    for _ in range(20):
        name = fake_data.company_name(rng)
        assert name
        assert len(name.split()) <= 5


def test_lorem_paragraph_sentence_count():
    text = fake_data.lorem_paragraph(random.Random(2), sentences=3)
    assert text.count(".") == 3
    assert text[0].isupper()


def test_lorem_paragraph_rejects_zero_sentences():
    with pytest.raises(ValueError):
        fake_data.lorem_paragraph(sentences=0)


def test_same_seed_same_values():
    a = random.Random(99)
    b = random.Random(99)
    assert fake_data.company_name(a) == fake_data.company_name(b)
    assert fake_data.lorem_paragraph(a) == fake_data.lorem_paragraph(b)
    assert fake_data.question_text(a) == fake_data.question_text(b)


def test_question_text_ends_with_question_mark():
    assert fake_data.question_text(random.Random(5)).endswith("?")
