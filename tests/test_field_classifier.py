from __future__ import annotations

from config.header_vocabulary import HeaderVocabulary
from parsing.field_classifier import FieldClassifier, FieldKind


def test_spanish_and_english_amount_headers_are_numeric():
    clf = FieldClassifier()
    for header in [
        "IMPORTEN NETO DE LA CIFRA DE NEGOCIO",
        "Gastos de personal",
        "RESULTADO DE EXPLOTACIÓN",
        "EBITDA",
        "ACTIVO CORRIENTE",
        "PASIVO CORRIENTE",
        "PATRIMONIO NETO",
        "EMPLEADOS",
        "APROVISIONAMIENTOS",
        "Revenue",
        "Total Liabilities",
    ]:
        assert clf.classify(header) is FieldKind.NUMERIC, header


def test_descriptive_headers_are_text():
    clf = FieldClassifier()
    for header in ["CIF EMPRESA", "DENOMINACIÓN SOCIAL", "CATEGORÍA", "OBJETO SOCIAL", "URL", "EJERCICIO", ""]:
        assert clf.classify(header) is FieldKind.TEXT, header


def test_keyword_table_is_swappable():
    vocab = HeaderVocabulary(numeric_keywords=("UMSATZ",))
    clf = FieldClassifier(vocab)
    assert clf.classify_headers(["Umsatz 2023", "EBITDA"]) == [FieldKind.NUMERIC, FieldKind.TEXT]
