import pytest

from cgbench.kernels import dot_product, residual_norm, waxpby


X = [1.5, -2.0, 3.25, 0.5, -4.0]
Y = [0.5, 1.0, -2.0, 8.0, 0.25]


def test_dot_product_pinned_value():
    assert dot_product(3, [1.0, 2.0, 3.0], [4.0, 5.0, 6.0]) == 32.0


def test_dot_product_symmetric():
    assert dot_product(len(X), X, Y) == dot_product(len(Y), Y, X)


def test_dot_product_self_is_sum_of_squares_of_ones():
    ones = [1.0] * 7
    assert dot_product(7, ones, ones) == 7.0


def test_dot_product_same_object_matches_copy():
    assert dot_product(len(X), X, X) == dot_product(len(X), X, list(X))


def test_dot_product_uses_only_first_n_entries():
    assert dot_product(2, X, Y) == dot_product(2, X[:2], Y[:2])


def test_dot_product_zero_length():
    assert dot_product(0, [], []) == 0.0


def test_dot_product_short_vector_raises():
    with pytest.raises(ValueError):
        dot_product(4, [1.0, 2.0], [1.0, 2.0, 3.0, 4.0])


def test_dot_product_negative_length_raises():
    with pytest.raises(ValueError):
        dot_product(-1, X, Y)


def test_waxpby_copy_with_zero_beta():
    assert waxpby(len(X), 1.0, X, 0.0, X) == X


def test_waxpby_difference_of_equal_vectors_is_zero():
    assert waxpby(len(X), 1.0, X, -1.0, X) == [0.0] * len(X)


def test_waxpby_general_branch_matches_swapped_arguments():
    assert waxpby(len(X), 2.0, X, 3.0, Y) == waxpby(len(Y), 3.0, Y, 2.0, X)


def test_waxpby_beta_one_matches_alpha_one_swapped():
    assert waxpby(len(X), 0.5, X, 1.0, Y) == waxpby(len(Y), 1.0, Y, 0.5, X)


def test_waxpby_result_length_is_n():
    assert len(waxpby(3, 1.0, X, 1.0, Y)) == 3


def test_waxpby_short_vector_raises():
    with pytest.raises(ValueError):
        waxpby(5, 1.0, X, 1.0, Y[:3])


def test_residual_norm_of_identical_vectors_is_zero():
    assert residual_norm(len(X), X, list(X)) == 0.0


def test_residual_norm_symmetric():
    assert residual_norm(len(X), X, Y) == residual_norm(len(Y), Y, X)


def test_residual_norm_is_max_abs_of_difference():
    diff = waxpby(len(X), 1.0, X, -1.0, Y)
    assert residual_norm(len(X), X, Y) == max(abs(d) for d in diff)


def test_residual_norm_pinned_value():
    assert residual_norm(3, [1.0, 1.0, 1.0], [1.0, -1.0, 1.0]) == 2.0


def test_residual_norm_zero_length():
    assert residual_norm(0, [], []) == 0.0


def test_residual_norm_short_vector_raises():
    with pytest.raises(ValueError):
        residual_norm(3, [1.0], [1.0, 2.0, 3.0])