import pytest

from cgbench.check_problem import check_problem
from cgbench.geometry import generate_geometry
from cgbench.multigrid import (
    MGData,
    build_hierarchy,
    generate_coarse_problem,
    multigrid_vcycle,
    prolongate,
    restrict,
)
from cgbench.problem import generate_problem
from cgbench.spmv import spmv
from cgbench.symgs import symgs


def _problem(n):
    geom = generate_geometry(1, 0, 1, 0, 0, 0, n, n, n)
    return generate_problem(geom)


def test_coarse_problem_halves_grid_and_is_valid():
    problem = _problem(4)
    coarse = generate_coarse_problem(problem.matrix)
    assert (coarse.geom.nx, coarse.geom.ny, coarse.geom.nz) == (2, 2, 2)
    assert coarse.local_number_of_rows == 8
    assert problem.matrix.coarse is coarse
    assert check_problem(coarse) == coarse.local_number_of_nonzeros


def test_f2c_operator_points_to_even_fine_points():
    problem = _problem(4)
    generate_coarse_problem(problem.matrix)
    data = problem.matrix.mg_data
    assert isinstance(data, MGData)
    f2c = data.f2c_operator
    assert len(f2c) == 8
    assert len(set(f2c)) == 8
    assert f2c[0] == 0
    for f in f2c:
        ix, iy, iz = f % 4, (f // 4) % 4, f // 16
        assert ix % 2 == 0 and iy % 2 == 0 and iz % 2 == 0


def test_smoother_steps_are_stored():
    problem = _problem(4)
    generate_coarse_problem(problem.matrix, 2, 3)
    data = problem.matrix.mg_data
    assert (data.presmoother_steps, data.postsmoother_steps) == (2, 3)
    assert len(data.rc) == 8
    assert len(data.axf) == problem.matrix.local_number_of_columns


def test_odd_dimensions_rejected():
    problem = _problem(3)
    with pytest.raises(ValueError):
        generate_coarse_problem(problem.matrix)


def test_build_hierarchy_levels():
    problem = _problem(8)
    levels = build_hierarchy(problem.matrix, 3)
    assert [m.local_number_of_rows for m in levels] == [512, 64, 8]
    assert levels[-1].mg_data is None
    assert levels[1].coarse is levels[2]


def test_build_hierarchy_single_level_and_invalid():
    problem = _problem(2)
    assert build_hierarchy(problem.matrix, 1) == [problem.matrix]
    with pytest.raises(ValueError):
        build_hierarchy(problem.matrix, 0)


def test_restrict_injects_residual():
    problem = _problem(4)
    generate_coarse_problem(problem.matrix)
    data = problem.matrix.mg_data
    rf = [float(i) for i in range(64)]
    rc = restrict(problem.matrix, rf)
    assert rc == [rf[f] for f in data.f2c_operator]
    assert data.rc == rc


def test_restrict_subtracts_stored_product():
    problem = _problem(4)
    generate_coarse_problem(problem.matrix)
    data = problem.matrix.mg_data
    data.axf = [1.0] * 64
    rc = restrict(problem.matrix, [1.0] * 64)
    assert rc == [0.0] * 8


def test_prolongate_adds_correction():
    problem = _problem(4)
    generate_coarse_problem(problem.matrix)
    data = problem.matrix.mg_data
    data.xc = [1.0] * 8
    xf = [0.0] * 64
    result = prolongate(problem.matrix, xf)
    assert xf == [0.0] * 64
    assert sum(result) == 8.0
    assert all(result[f] == 1.0 for f in data.f2c_operator)


def test_transfer_without_coarse_level_raises():
    problem = _problem(2)
    with pytest.raises(ValueError):
        restrict(problem.matrix, problem.b)
    with pytest.raises(ValueError):
        prolongate(problem.matrix, problem.x)


def test_vcycle_without_coarse_level_is_symgs():
    problem = _problem(3)
    matrix = problem.matrix
    expected = symgs(matrix, problem.b, [0.0] * matrix.local_number_of_columns)
    assert multigrid_vcycle(matrix, problem.b) == expected


def test_vcycle_reduces_residual():
    problem = _problem(8)
    matrix = problem.matrix
    build_hierarchy(matrix, 3)
    x = multigrid_vcycle(matrix, problem.b)
    assert len(x) == matrix.local_number_of_columns
    ax = spmv(matrix, x)
    before = max(abs(v) for v in problem.b)
    after = max(abs(b - a) for b, a in zip(problem.b, ax))
    assert after < before


def test_vcycle_is_linear():
    problem = _problem(4)
    matrix = problem.matrix
    build_hierarchy(matrix, 2)
    x1 = multigrid_vcycle(matrix, problem.b)
    x2 = multigrid_vcycle(matrix, [2.0 * v for v in problem.b])
    for a, b in zip(x1, x2):
        assert b == pytest.approx(2.0 * a)