import pytest

from workload.synthetic_generator import WorkloadGenerator


@pytest.fixture
def gen():
    return WorkloadGenerator(key_space_size=50, num_requests=500, seed=42)


@pytest.mark.parametrize("method,kwargs", [
    ("generate_uniform_workload", {}),
    ("generate_zipf_workload", {"alpha": 1.3}),
    ("generate_bursty_workload", {"burst_size": 4, "burst_freq": 0.3}),
    ("generate_phase_workload", {"phase_length": 20, "num_phases": 5}),
    ("generate_mixed_workload", {"zipf_alpha": 1.5, "burst_freq": 0.2}),
])
def test_workloads_have_requested_length_and_key_space(gen, method, kwargs):
    workload = getattr(gen, method)(**kwargs)

    assert len(workload) == 500
    for key, value in workload:
        n = int(key.split("_")[1])
        assert 0 <= n < 50
        assert value == f"value_{n}"


def test_same_seed_gives_same_workload():
    a = WorkloadGenerator(100, 200, seed=1).generate_zipf_workload()
    b = WorkloadGenerator(100, 200, seed=1).generate_zipf_workload()

    assert a == b


def test_zipf_is_skewed(gen):
    workload = gen.generate_zipf_workload(alpha=1.5)
    head = sum(1 for key, _ in workload if key == "key_0")

    assert head > len(workload) / 10


def test_phase_workload_stays_in_its_slice(gen):
    workload = gen.generate_phase_workload(phase_length=100, num_phases=5)
    first_phase = {int(key.split("_")[1]) for key, _ in workload[:100]}
    second_phase = {int(key.split("_")[1]) for key, _ in workload[100:200]}

    assert first_phase <= set(range(0, 10))
    assert second_phase <= set(range(10, 20))


def test_bursty_workload_contains_repeats(gen):
    workload = gen.generate_bursty_workload(burst_size=5, burst_freq=1.0)

    assert workload[0] == workload[4]


def test_empty_workload():
    assert WorkloadGenerator(10, 0).generate_mixed_workload() == []


@pytest.mark.parametrize("call", [
    lambda g: g.generate_zipf_workload(alpha=1.0),
    lambda g: g.generate_bursty_workload(burst_size=0),
    lambda g: g.generate_bursty_workload(burst_freq=1.5),
    lambda g: g.generate_phase_workload(num_phases=0),
])
def test_invalid_arguments_raise(gen, call):
    with pytest.raises(ValueError):
        call(gen)


def test_invalid_key_space_raises():
    with pytest.raises(ValueError):
        WorkloadGenerator(0, 10)
