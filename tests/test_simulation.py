import numpy as np
import pytest

from directnbody.body import Body
from directnbody.body_view import BodyView
from directnbody.initial_condition_generator import GeneratorConfig, InitialConditionGenerator
from directnbody.sim_config import SimConfig
from directnbody.simulation import NBodySimulation
from directnbody.simulation_state import SimulationState
from directnbody.vector2 import Vector2


MODES = ["direct", "vectorized"]


def _random_sim(mode, n=15, seed=7, **kw):
    gen = InitialConditionGenerator(GeneratorConfig(field_width=200.0, field_height=200.0, seed=seed))
    masses, pos, vel = gen.generate_arrays(n)
    return NBodySimulation(masses=masses, positions=pos, velocities=vel, G=20.0, dt=0.01, mode=mode, **kw)


def test_body_rejects_invalid_mass():
    for bad in (0.0, -1.0, float("nan"), float("inf")):
        with pytest.raises(ValueError):
            Body(bad)
    b = Body(2.0, (1.0, 2.0))
    with pytest.raises(AttributeError):
        b.mass = 3.0


def test_body_copies_input_vectors():
    p = Vector2(1.0, 2.0)
    b = Body(1.0, p)
    b.position += Vector2(1.0, 1.0)
    assert p == Vector2(1.0, 2.0)
    assert b.position == Vector2(2.0, 3.0)
    assert (b.x, b.y, b.vx, b.vy) == (2.0, 3.0, 0.0, 0.0)


def test_state_validation():
    state = SimulationState()
    with pytest.raises(ValueError):
        state.build_state(None, masses=[1.0, -2.0], positions=[(0, 0), (1, 1)])
    with pytest.raises(ValueError):
        state.build_state(None, masses=[1.0], positions=None)
    with pytest.raises(ValueError):
        state.build_state(None, masses=[1.0, 1.0], positions=[(0, 0), (np.nan, 1)])

    state.build_state(None, masses=[1.0, 2.0], positions=[(0, 0), (1, 1)])
    assert state.n_bodies == 2
    np.testing.assert_array_equal(state.vel, np.zeros((2, 2)))
    with pytest.raises(ValueError):
        state.pos = np.zeros((3, 2))
    state.vel = [1.0, 2.0, 3.0, 4.0]
    np.testing.assert_array_equal(state.vel, [[1.0, 2.0], [3.0, 4.0]])


def test_body_view_writes_through_to_state():
    sim = NBodySimulation([Body(2.0, (1.0, 2.0), (0.0, 0.0))])
    view = sim.bodies[0]
    assert isinstance(view, BodyView)
    view.velocity += Vector2(0.5, -0.5)
    view.x = 4.0
    np.testing.assert_array_equal(sim.state.vel[0], [0.5, -0.5])
    np.testing.assert_array_equal(sim.state.pos[0], [4.0, 2.0])
    assert view.position == Vector2(4.0, 2.0)
    with pytest.raises(AttributeError):
        view.mass = 1.0


@pytest.mark.parametrize("mode", MODES)
def test_two_body_step(mode):
    sim = NBodySimulation(
        [Body(1.0, (0.0, 0.0)), Body(1.0, (10.0, 0.0))], G=1.0, dt=0.01, mode=mode
    )
    sim.step()
    v = sim.velocities
    assert v[0, 0] == pytest.approx(1e-4, rel=1e-12)
    assert v[1, 0] == pytest.approx(-1e-4, rel=1e-12)
    assert v[0, 1] == 0.0 and v[1, 1] == 0.0
    assert sim.positions[0, 0] == pytest.approx(1e-6, rel=1e-9)
    assert sim.steps_taken == 1
    assert sim.time == pytest.approx(0.01)


@pytest.mark.parametrize("mode", MODES)
def test_degenerate_collections(mode):
    empty = NBodySimulation(masses=[], positions=[], mode=mode)
    empty.run(5)
    assert empty.n_bodies == 0
    assert empty.steps_taken == 5

    lone = NBodySimulation(
        [Body(3.0, (1.0, 1.0), (2.0, -1.0))], G=20.0, dt=0.5, mode=mode
    )
    lone.run(4)
    np.testing.assert_array_equal(lone.velocities, [[2.0, -1.0]])
    np.testing.assert_allclose(lone.positions, [[5.0, -1.0]])


@pytest.mark.parametrize("mode", MODES)
def test_zero_gravity_is_pure_drift(mode):
    sim = _random_sim(mode, n=6)
    sim.state.vel = np.arange(12, dtype=float).reshape(6, 2) * 0.1
    pos0, vel0 = sim.positions, sim.velocities
    sim.cfg.G = 0.0
    sim.step(0.25)
    np.testing.assert_array_equal(sim.velocities, vel0)
    np.testing.assert_array_equal(sim.positions, pos0 + vel0 * 0.25)


def test_schemes_agree():
    direct = _random_sim("direct")
    vectorized = _random_sim("vectorized")
    direct.run(5)
    vectorized.run(5)
    np.testing.assert_allclose(vectorized.velocities, direct.velocities, rtol=1e-8, atol=1e-10)
    np.testing.assert_allclose(vectorized.positions, direct.positions, rtol=1e-8, atol=1e-10)


@pytest.mark.parametrize("mode", MODES)
def test_determinism(mode):
    a = _random_sim(mode)
    b = _random_sim(mode)
    a.run(3)
    b.run(3)
    np.testing.assert_array_equal(a.positions, b.positions)
    np.testing.assert_array_equal(a.velocities, b.velocities)


@pytest.mark.parametrize("mode", MODES)
def test_momentum_is_conserved(mode):
    sim = _random_sim(mode, n=10)
    p0 = sim.diagnostics().linear_momentum()
    sim.run(20)
    np.testing.assert_allclose(sim.diagnostics().linear_momentum(), p0, atol=1e-9)


def test_negative_timestep_reverses_free_motion():
    sim = NBodySimulation(
        [Body(1.0, (0.0, 0.0), (1.0, 2.0)), Body(1.0, (100.0, 0.0), (-1.0, 0.0))], G=0.0
    )
    pos0 = sim.positions
    sim.run(3)
    for _ in range(3):
        sim.step(-sim.dt)
    np.testing.assert_allclose(sim.positions, pos0, atol=1e-12)
    assert sim.time == pytest.approx(0.0, abs=1e-15)


def test_non_finite_timestep_is_rejected():
    sim = _random_sim("vectorized", n=3)
    with pytest.raises(ValueError):
        sim.step(float("nan"))
    with pytest.raises(ValueError):
        sim.run(-1)


def test_snapshot_restore_replays_identically():
    sim = _random_sim("vectorized")
    sim.run(2)
    snap = sim.snapshot()
    sim.run(3)
    pos_after = sim.positions
    sim.restore(snap)
    assert sim.steps_taken == 2
    sim.run(3)
    np.testing.assert_array_equal(sim.positions, pos_after)


def test_float32_mode():
    cfg = SimConfig(fast_float32=True)
    sim = _random_sim("vectorized", n=5, cfg=cfg)
    sim.run(2)
    assert sim.state.pos.dtype == np.float32
    assert sim.state.vel.dtype == np.float32
    ref = _random_sim("vectorized", n=5)
    ref.run(2)
    np.testing.assert_allclose(sim.positions, ref.positions, rtol=1e-5, atol=1e-3)


def test_unknown_mode_is_rejected():
    with pytest.raises(ValueError):
        SimConfig(integrator_mode="barnes_hut")
    with pytest.raises(ValueError):
        NBodySimulation([Body(1.0)], mode="barnes_hut")


def test_config_validation_and_copy():
    with pytest.raises(ValueError):
        SimConfig(n_bodies=-1)
    with pytest.raises(ValueError):
        SimConfig(snapshot_every=0)
    with pytest.raises(ValueError):
        SimConfig(min_body_mass=0.0)
    cfg = SimConfig(G=5.0)
    other = cfg.copy()
    other.G = 1.0
    assert cfg.G == 5.0


def test_diagnostics_values():
    sim = NBodySimulation([Body(1.0, (0.0, 0.0)), Body(1.0, (10.0, 0.0))], G=1.0)
    diag = sim.diagnostics()
    assert diag.potential_energy() == pytest.approx(-0.1)
    assert diag.kinetic_energy() == 0.0
    np.testing.assert_allclose(diag.center_of_mass(), [5.0, 0.0])

    close = NBodySimulation([Body(3.0, (0.0, 0.0)), Body(4.0, (1.0, 0.0))], G=1.0)
    assert close.diagnostics().potential_energy() == pytest.approx(-12.0 / 3.5)

    sim.step()
    np.testing.assert_allclose(sim.diagnostics().center_of_mass_velocity(), [0.0, 0.0], atol=1e-15)
    summary = sim.diagnostics().summary()
    assert summary["kinetic_energy"] > 0.0
    assert summary["time"] == pytest.approx(sim.dt)


def test_generator_matches_reference_ranges():
    gen = InitialConditionGenerator(GeneratorConfig(seed=11))
    bodies = gen.generate_bodies(200)
    assert len(bodies) == 200
    for b in bodies:
        assert 2.5 <= b.mass < 7.5
        assert -500.0 <= b.x < 500.0
        assert -500.0 <= b.y < 500.0
        assert (b.vx, b.vy) == (0.0, 0.0)

    again = InitialConditionGenerator(GeneratorConfig(seed=11)).generate_bodies(200)
    assert [b.mass for b in again] == [b.mass for b in bodies]
    assert InitialConditionGenerator().generate_arrays(0)[0].shape == (0,)


def test_restore_rejects_invalid_snapshots():
    sim = NBodySimulation([Body(1.0, (0.0, 0.0)), Body(2.0, (5.0, 0.0))], G=1.0)
    sim.step()
    pos_before = sim.positions

    bad_mass = sim.snapshot()
    bad_mass["masses"] = np.array([-1.0, 0.0])
    with pytest.raises(ValueError):
        sim.restore(bad_mass)

    changed_mass = sim.snapshot()
    changed_mass["masses"] = np.array([1.0, 3.0])
    with pytest.raises(ValueError):
        sim.restore(changed_mass)

    wrong_shape = sim.snapshot()
    wrong_shape["positions"] = np.zeros((3, 2))
    with pytest.raises(ValueError):
        sim.restore(wrong_shape)

    non_finite = sim.snapshot()
    non_finite["velocities"] = np.array([[np.nan, 0.0], [0.0, 0.0]])
    with pytest.raises(ValueError):
        sim.restore(non_finite)

    np.testing.assert_array_equal(sim.masses, [1.0, 2.0])
    np.testing.assert_array_equal(sim.positions, pos_before)


def test_non_finite_parameters_are_rejected():
    bodies = [Body(1.0, (0.0, 0.0)), Body(1.0, (10.0, 0.0))]
    for bad in (float("nan"), float("inf")):
        with pytest.raises(ValueError):
            NBodySimulation(bodies, G=bad)
        with pytest.raises(ValueError):
            NBodySimulation(bodies, dt=bad)
        with pytest.raises(ValueError):
            SimConfig(G=bad)
        with pytest.raises(ValueError):
            SimConfig(dt=bad)
