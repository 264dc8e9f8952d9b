import pytest

from core.math import Vec3, Ray
from core.geometry import Sphere
from core.intersection import intersect, intersect_sphere, NO_HIT
from core.scene import Scene
from core.shading import HitRecord


@pytest.fixture
def unit_sphere():
    return Sphere(Vec3(0.0, 0.0, 0.0), 1.0, Vec3(1.0, 1.0, 1.0))


@pytest.mark.parametrize("d, r", [(5.0, 1.0), (3.0, 0.75), (10.0, 2.5)])
def test_head_on_hit_distance(d, r):
    """A ray from (0,0,d) aimed down -z hits a sphere at the origin at d - r."""
    sphere = Sphere(Vec3(0.0, 0.0, 0.0), r, Vec3(1.0, 0.0, 0.0))
    ray = Ray(Vec3(0.0, 0.0, d), Vec3(0.0, 0.0, -1.0))
    assert intersect_sphere(sphere, ray) == pytest.approx(d - r, abs=1e-9)


def test_miss_when_closest_approach_exceeds_radius(unit_sphere):
    ray = Ray(Vec3(0.0, 2.0, 5.0), Vec3(0.0, 0.0, -1.0))
    assert intersect_sphere(unit_sphere, ray) == NO_HIT


def test_grazing_ray_still_hits(unit_sphere):
    ray = Ray(Vec3(0.0, 0.5, 5.0), Vec3(0.0, 0.0, -1.0))
    t = intersect_sphere(unit_sphere, ray)
    assert t != NO_HIT
    assert t < 5.0


def test_sphere_behind_origin_is_a_miss(unit_sphere):
    ray = Ray(Vec3(0.0, 0.0, 5.0), Vec3(0.0, 0.0, 1.0))
    assert intersect_sphere(unit_sphere, ray) == NO_HIT


def test_origin_on_surface_heading_inward_is_a_miss(unit_sphere):
    # near root is exactly t == 0
    ray = Ray(Vec3(0.0, 0.0, 1.0), Vec3(0.0, 0.0, -1.0))
    assert intersect_sphere(unit_sphere, ray) == NO_HIT


def test_origin_inside_sphere_is_a_miss(unit_sphere):
    # only the near root is used, and it lies behind the origin
    ray = Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, -1.0))
    assert intersect_sphere(unit_sphere, ray) == NO_HIT


def test_intersect_dispatches_on_type(unit_sphere):
    ray = Ray(Vec3(0.0, 0.0, 5.0), Vec3(0.0, 0.0, -1.0))
    assert intersect(unit_sphere, ray) == intersect_sphere(unit_sphere, ray)


def test_intersect_rejects_unknown_primitive():
    ray = Ray(Vec3(0.0, 0.0, 5.0), Vec3(0.0, 0.0, -1.0))
    with pytest.raises(TypeError):
        intersect(object(), ray)


# --- Scene.hit ---

def test_scene_hit_picks_nearest_regardless_of_order():
    far = Sphere(Vec3(0.0, 0.0, -5.0), 1.0, Vec3(0.0, 0.0, 1.0))
    near = Sphere(Vec3(0.0, 0.0, -2.0), 0.5, Vec3(1.0, 0.0, 0.0))
    scene = Scene()
    scene.add_object(far)
    scene.add_object(near)

    rec = HitRecord()
    ray = Ray(Vec3(0.0, 0.0, 2.0), Vec3(0.0, 0.0, -1.0))
    assert scene.hit(ray, rec)
    assert rec.index == 1
    assert rec.obj is near
    assert rec.t == pytest.approx(3.5)
    assert (rec.point.x, rec.point.y, rec.point.z) == pytest.approx((0.0, 0.0, -1.5))
    assert (rec.normal.x, rec.normal.y, rec.normal.z) == pytest.approx((0.0, 0.0, 1.0))


def test_scene_hit_first_object_wins_ties():
    a = Sphere(Vec3(0.0, 0.0, -3.0), 1.0, Vec3(1.0, 0.0, 0.0))
    b = Sphere(Vec3(0.0, 0.0, -3.0), 1.0, Vec3(0.0, 1.0, 0.0))
    scene = Scene()
    scene.add_object(a)
    scene.add_object(b)

    rec = HitRecord()
    assert scene.hit(Ray(Vec3(0.0, 0.0, 2.0), Vec3(0.0, 0.0, -1.0)), rec)
    assert rec.index == 0
    assert rec.obj is a


def test_scene_hit_miss_leaves_record_untouched():
    scene = Scene()
    scene.add_object(Sphere(Vec3(0.0, 0.0, -3.0), 1.0, Vec3(1.0, 0.0, 0.0)))

    rec = HitRecord()
    assert not scene.hit(Ray(Vec3(0.0, 0.0, 2.0), Vec3(0.0, 1.0, 0.0)), rec)
    assert rec.t == NO_HIT
    assert rec.index == -1
    assert rec.obj is None


def test_empty_scene_never_hits():
    assert not Scene().hit(Ray(Vec3(0.0, 0.0, 2.0), Vec3(0.0, 0.0, -1.0)), HitRecord())
