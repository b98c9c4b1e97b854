import pytest

from soft_wireframe_engine import (Camera, FrameLoop, FrameState, MemorySurface, Mesh,
                                   Renderer, Scene, Vec3, spin_animation)


@pytest.fixture
def loop(cube_scene):
    renderer = Renderer(MemorySurface(80, 60))
    return FrameLoop(renderer, cube_scene, spin_animation(0.01))


def test_tick_runs_a_full_frame(loop):
    loop.tick()
    assert loop.renderer.state is FrameState.PRESENTED
    assert loop.renderer.surface.present_count == 1
    assert loop.renderer.surface.front.any()
    assert loop.frame_count == 1


def test_animation_runs_before_render(loop):
    loop.tick()
    loop.tick()
    rotation = loop.scene.meshes[0].rotation
    assert rotation.x == pytest.approx(0.02)
    assert rotation.y == pytest.approx(0.02)
    assert rotation.z == 0


def test_run_fixed_frames(loop):
    assert loop.run(frames=3) == 3
    assert loop.renderer.surface.present_count == 3


def test_run_until_told_to_stop(loop):
    answers = iter([True, True, False])
    assert loop.run(should_continue=lambda: next(answers)) == 2


def test_no_animation_keeps_scene_still(front_camera):
    scene = Scene(front_camera, [Mesh.cube()])
    loop = FrameLoop(Renderer(MemorySurface(40, 30)), scene)
    loop.run(frames=2)
    assert scene.meshes[0].rotation == Vec3(0, 0, 0)


def test_scene_spin_and_clear():
    scene = Scene(Camera(), [Mesh.cube(), Mesh.cube()])
    scene.spin(0.1, 0.2, 0.3)
    assert all(m.rotation == Vec3(0.1, 0.2, 0.3) for m in scene.meshes)
    scene.clear()
    assert scene.meshes == []


def test_camera_zoom_and_pan():
    camera = Camera(Vec3(0, 0, 10), Vec3(0, 0, 0))
    camera.zoom(-2)
    assert camera.position == Vec3(0, 0, 8)
    camera.zoom(-100)
    assert camera.position.length() == pytest.approx(0.5)
    camera.pan(1, 2)
    assert camera.target == Vec3(1, 2, 0)
