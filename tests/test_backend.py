import pytest

from adept.backend import BackendType, backend_name


def test_backend_enum_values_follow_declaration_order():
    assert [backend_name(value) for value in range(3)] == [
        "BackendType::CPU",
        "BackendType::CUDA",
        "BackendType::HIP",
    ]
    assert [BackendType(value) for value in range(3)] == [
        BackendType.CPU,
        BackendType.CUDA,
        BackendType.HIP,
    ]


@pytest.mark.parametrize(
    "backend, expected",
    [
        (BackendType.CPU, "BackendType::CPU"),
        (BackendType.CUDA, "BackendType::CUDA"),
        (BackendType.HIP, "BackendType::HIP"),
    ],
)
def test_backend_name_known(backend, expected):
    assert backend_name(backend) == expected


def test_backend_name_accepts_plain_integers():
    assert backend_name(1) == backend_name(BackendType.CUDA)


@pytest.mark.parametrize("value", [3, -1, 42, "CPU", None])
def test_backend_name_unknown(value):
    assert backend_name(value) == "Unknown backend"


def test_every_backend_name_carries_its_member_name():
    for backend in BackendType:
        assert backend_name(backend).endswith("::" + backend.name)