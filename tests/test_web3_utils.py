from collections import namedtuple

from eth_test_utils.web3_utils import object_matches_expected, print_obj, web3_tuple_to_object


class TestTupleToObject:
    def test_named_fields_only(self) -> None:
        raw = {"0": "0xabc", "1": "5", "owner": "0xabc", "amount": "5", "big": str(2 ** 200)}
        assert web3_tuple_to_object(raw) == {"owner": "0xabc", "amount": 5, "big": 2 ** 200}

    def test_no_integer_decoding(self) -> None:
        assert web3_tuple_to_object({"amount": "5"}, decode_integers=False) == {"amount": "5"}

    def test_int_keys_skipped(self) -> None:
        assert web3_tuple_to_object({0: 1, "x": 2}) == {"x": 2}

    def test_namedtuple(self) -> None:
        Row = namedtuple("Row", ["owner", "amount"])
        assert web3_tuple_to_object(Row("0xabc", "12")) == {"owner": "0xabc", "amount": 12}

    def test_non_mapping(self) -> None:
        assert web3_tuple_to_object(None) is None
        assert web3_tuple_to_object("x") is None
        assert web3_tuple_to_object(5) is None


class TestMatchesExpected:
    def test_subset_matches(self) -> None:
        assert object_matches_expected({"a": 1}, {"a": 1, "b": 2})

    def test_mismatch(self) -> None:
        assert not object_matches_expected({"a": 1}, {"a": 2})
        assert not object_matches_expected({"c": 1}, {"a": 1})

    def test_non_mapping(self) -> None:
        assert not object_matches_expected(None, {"a": 1})
        assert not object_matches_expected({"a": 1}, [1])


class TestPrintObj:
    def test_stringifies_numbers(self) -> None:
        obj = {
            "0": 1,
            "a": 5,
            "b": "s",
            "c": {"d": 2 ** 70},
            "e": None,
            "f": True,
            "g": [1, 2],
        }
        assert print_obj(obj) == {
            "a": "5",
            "b": "s",
            "c": {"d": str(2 ** 70)},
            "e": None,
            "f": True,
            "g": "[1, 2]",
        }

    def test_keep_numeric_keys(self) -> None:
        assert print_obj({"0": 1}, ignore_numeric_keys=False) == {"0": "1"}
