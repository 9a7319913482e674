from license_index.classifier import Classifier


def test_normalized_text_uses_single_space_separators() -> None:
    classifier = Classifier()
    classifier.add_content("lic", "isc", "", b"Permission to use,\n   copy, modify\n\n and/or distribute")

    doc = classifier.get_indexed_document("lic", "isc", "")

    assert doc is not None
    assert doc.normalized.count(" ") == doc.size() - 1
    assert "  " not in doc.normalized
    assert doc.normalized.split(" ") == [classifier.dictionary.get_word(i) for i in doc.token_ids()]


def test_target_normalization_is_stable_across_calls() -> None:
    classifier = Classifier()
    classifier.add_content("lic", "isc", "", b"the software is provided as is")

    first = classifier.create_target_document(b"The Software is provided AS IS, without warranty")
    second = classifier.create_target_document(b"The Software is provided AS IS, without warranty")

    assert first.normalized == second.normalized
    assert first.normalized.endswith("UNKNOWN UNKNOWN")
    assert classifier.create_target_document(b"").normalized == ""
