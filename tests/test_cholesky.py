import pytest

from codedrills.cholesky import solve_augmented, upper_factor

AUGMENTED = [
    [5, 10, 30, 8],
    [10, 30, 100, 20],
    [30, 100, 354, 70],
]


def test_solution_satisfies_system():
    root = solve_augmented(AUGMENTED)
    assert len(root) == 3
    for row in AUGMENTED:
        lhs = sum(a * x for a, x in zip(row[:3], root))
        assert lhs == pytest.approx(row[3])


def test_upper_factor_structure():
    a = [row[:3] for row in AUGMENTED]
    r = upper_factor(a)
    assert r[0] == [5, 10, 30]
    assert r[1][0] == 0 and r[2][0] == 0 and r[2][1] == 0
    assert all(r[i][i] > 0 for i in range(3))


def test_upper_factor_reconstructs_matrix():
    a = [row[:3] for row in AUGMENTED]
    r = upper_factor(a)
    for i in range(3):
        for j in range(3):
            value = sum(r[k][i] * r[k][j] / r[k][k] for k in range(3))
            assert value == pytest.approx(a[i][j])


def test_two_by_two_factor():
    assert upper_factor([[4, 2], [2, 3]]) == [[4.0, 2.0], [0.0, 2.0]]


def test_non_square_rejected():
    with pytest.raises(ValueError):
        upper_factor([[1, 2, 3], [4, 5, 6]])


def test_bad_augmented_shape():
    with pytest.raises(ValueError):
        solve_augmented([[1, 2], [3, 4]])


def test_singular_rejected():
    with pytest.raises(ValueError):
        solve_augmented([[1, 1, 2], [1, 1, 2]])