import numpy as np
import pytest

from fishersubspace import InvalidArgument, UnsupportedElementType, project, reconstruct


@pytest.fixture
def data():
    rng = np.random.default_rng(1)
    return rng.normal(size=(20, 5)) @ np.diag([5.0, 3.0, 2.0, 1.0, 0.5]) + 10.0


def test_project_shape_and_centering(data):
    W = np.eye(5)[:, :2]
    mean = data.mean(axis=0)
    Y = project(W, mean, data)
    assert Y.shape == (20, 2)
    np.testing.assert_allclose(Y, (data - mean)[:, :2])


def test_project_without_mean(data):
    W = np.eye(5)[:, :3]
    np.testing.assert_allclose(project(W, None, data), data[:, :3])
    np.testing.assert_allclose(project(W, np.array([]), data), data[:, :3])


def test_project_ignores_mean_of_wrong_size(data):
    W = np.eye(5)[:, :2]
    np.testing.assert_allclose(project(W, np.ones(3), data), data[:, :2])


def test_project_converts_to_basis_type():
    W = np.eye(2, dtype=np.float32)
    Y = project(W, None, np.array([[1, 2], [3, 4]], dtype=np.uint8))
    assert Y.dtype == np.float32


def test_project_single_sample():
    W = np.eye(3)[:, :1]
    assert project(W, None, np.array([4.0, 5.0, 6.0])).shape == (1, 1)


def test_project_dimension_mismatch(data):
    with pytest.raises(InvalidArgument):
        project(np.eye(4), None, data)


def test_project_rejects_complex_basis(data):
    with pytest.raises(UnsupportedElementType):
        project(np.eye(5, dtype=complex), None, data)


def test_reconstruct_adds_mean_only_when_it_matches(data):
    W = np.eye(5)[:, :2]
    Y = np.ones((4, 2))
    mean = np.arange(5.0)
    np.testing.assert_allclose(reconstruct(W, mean, Y), Y @ W.T + mean)
    np.testing.assert_allclose(reconstruct(W, np.ones(2), Y), Y @ W.T)
    assert reconstruct(W, None, Y).shape == (4, 5)


def test_reconstruct_component_mismatch():
    with pytest.raises(InvalidArgument):
        reconstruct(np.eye(5)[:, :2], None, np.ones((4, 3)))


def test_reconstruction_error_shrinks_with_more_components(data):
    mean = data.mean(axis=0)
    _, _, Vt = np.linalg.svd(data - mean, full_matrices=False)
    errors = []
    for k in range(1, 6):
        W = Vt[:k].T
        X_hat = reconstruct(W, mean, project(W, mean, data))
        errors.append(np.linalg.norm(data - X_hat))
    assert all(a >= b - 1e-9 for a, b in zip(errors, errors[1:]))
    assert errors[-1] == pytest.approx(0.0, abs=1e-9)
