import pytest

from arrays_util.representation import HashCode, ToString


def test_to_string():
    assert ToString().execute([1, 2], 2) == "[1, 2]"
    assert ToString().execute([-3, 0, 12], 3) == "[-3, 0, 12]"
    assert ToString().execute([7], 1) == "[7]"


def test_to_string_empty():
    assert ToString().execute([], 0) == "[NULL]"
    assert ToString().execute([1, 2], 0) == "[NULL]"


def test_hash_code_none_is_zero():
    assert HashCode().execute(None, 0) == 0
    assert HashCode().execute(None, 5) == 0


def test_hash_code_empty_is_seed():
    assert HashCode().execute([], 0) == 1


def test_hash_code_formula():
    # 1 -> 1*19 + 3 = 22 -> 22*19 + (-2 ^ -1 = 1) = 419
    assert HashCode().execute([3, -2], 2) == 419


def test_hash_code_deterministic_and_order_sensitive():
    data = [5, -3, 0, 0, 5, 2]
    assert HashCode().execute(data, 6) == HashCode().execute(list(data), 6)
    assert HashCode().execute([1, 2], 2) != HashCode().execute([2, 1], 2)


def test_hash_code_folds_negative_values():
    assert HashCode().execute([-1], 1) == HashCode().execute([0], 1)
    assert HashCode().execute([-(2 ** 31)], 1) == 19 + 2 ** 31 - 1


def test_hash_code_wraps_to_64_bits():
    value = HashCode().execute([2 ** 31 - 1] * 40, 40)
    assert 0 <= value < 2 ** 64


@pytest.mark.parametrize("operation", [ToString(), HashCode()])
def test_representation_type_error(operation):
    with pytest.raises(TypeError):
        operation.execute(["x"], 1)
