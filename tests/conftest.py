import pytest


@pytest.fixture
def bounds():
    return (0.0, 0.0, 100.0, 100.0)


@pytest.fixture(params=["f32", "f64", "i32", "i64"])
def dtype(request):
    return request.param
