# scenes.py
"""
Demo scenes. Every builder takes the random source used to lay out the
scene plus optional camera overrides, and returns (world, camera).
"""
import random
from typing import Tuple
from rayonetta.camera import Camera
from rayonetta.core.vector import Color, Point3, Vector3
from rayonetta.geometry import (
    BVHNode,
    ConstantMedium,
    HittableList,
    Plane,
    Quad,
    RotateY,
    Sphere,
    Translate,
    make_box,
)
from rayonetta.materials import (
    CheckerTexture,
    Dielectric,
    DiffuseLight,
    ImageTexture,
    Lambertian,
    Metal,
    NoiseTexture,
)

DEFAULT_TEXTURE = "assets/earthmap.jpg"
SKY = Color(0.70, 0.80, 1.00)
BLACK = Color(0.0, 0.0, 0.0)


def _camera(overrides: dict, **settings) -> Camera:
    settings.update({k: v for k, v in overrides.items() if v is not None})
    return Camera(**settings)


def bouncing_spheres(rng=random, **camera_overrides) -> Tuple[HittableList, Camera]:
    """Grid of small random spheres, some in motion, around three large ones."""
    world = HittableList()

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - Point3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = Color.random(rng) * Color.random(rng)
                center2 = center + Vector3(0, rng.uniform(0, 0.5), 0)
                world.add(Sphere.moving(center, center2, 0.2, Lambertian(albedo)))
            elif choose_mat < 0.95:
                albedo = Color.random(rng, 0.5, 1.0)
                fuzz = rng.uniform(0, 0.5)
                world.add(Sphere(center, 0.2, Metal(albedo, fuzz)))
            else:
                world.add(Sphere(center, 0.2, Dielectric(1.5)))

    world.add(Sphere(Point3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, Lambertian(Color(0.4, 0.2, 0.1))))
    world.add(Sphere(Point3(4, 1, 0), 1.0, Metal(Color(0.7, 0.6, 0.5), 0.0)))

    # The ground plane is unbounded, so it sits beside the BVH, not in it.
    scene = HittableList([BVHNode(world.objects)])
    checker = CheckerTexture(0.32, Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9))
    scene.add(Plane(Vector3(0, 1, 0), Point3(0, 0, 0), Lambertian(checker)))

    camera = _camera(camera_overrides,
                     aspect_ratio=16.0 / 9.0, image_width=400, samples_per_pixel=100, max_depth=50,
                     vfov=20, lookfrom=Point3(13, 2, 3), lookat=Point3(0, 0, 0),
                     defocus_angle=0.6, focus_dist=10.0, background=SKY)
    return scene, camera


def checkered_spheres(rng=random, **camera_overrides) -> Tuple[HittableList, Camera]:
    checker = Lambertian(CheckerTexture(0.32, Color(0.2, 0.3, 0.1), Color(0.9, 0.9, 0.9)))
    world = HittableList([
        Sphere(Point3(0, -10, 0), 10, checker),
        Sphere(Point3(0, 10, 0), 10, checker),
    ])
    camera = _camera(camera_overrides,
                     aspect_ratio=16.0 / 9.0, image_width=400, samples_per_pixel=100, max_depth=50,
                     vfov=20, lookfrom=Point3(13, 2, 3), lookat=Point3(0, 0, 0), background=SKY)
    return world, camera


def earth(rng=random, texture_path: str = DEFAULT_TEXTURE, **camera_overrides) -> Tuple[HittableList, Camera]:
    """Image-textured globe. Fails if `texture_path` is missing or unreadable."""
    surface = Lambertian(ImageTexture(texture_path))
    world = HittableList([Sphere(Point3(0, 0, 0), 2, surface)])
    camera = _camera(camera_overrides,
                     aspect_ratio=16.0 / 9.0, image_width=400, samples_per_pixel=100, max_depth=50,
                     vfov=20, lookfrom=Point3(0, 0, 12), lookat=Point3(0, 0, 0), background=SKY)
    return world, camera


def perlin_spheres(rng=random, **camera_overrides) -> Tuple[HittableList, Camera]:
    marble = Lambertian(NoiseTexture(4.0, rng))
    world = HittableList([
        Plane(Vector3(0, 1, 0), Point3(0, 0, 0), marble),
        Sphere(Point3(0, 2, 0), 2, marble),
    ])
    camera = _camera(camera_overrides,
                     aspect_ratio=16.0 / 9.0, image_width=400, samples_per_pixel=100, max_depth=50,
                     vfov=20, lookfrom=Point3(13, 2, 3), lookat=Point3(0, 1, 0), background=SKY)
    return world, camera


def quadrilaterals(rng=random, **camera_overrides) -> Tuple[HittableList, Camera]:
    world = HittableList([
        Quad(Point3(-3, -2, 5), Vector3(0, 0, -4), Vector3(0, 4, 0), Lambertian(Color(1.0, 0.2, 0.2))),
        Quad(Point3(-2, -2, 0), Vector3(4, 0, 0), Vector3(0, 4, 0), Lambertian(Color(0.2, 1.0, 0.2))),
        Quad(Point3(3, -2, 1), Vector3(0, 0, 4), Vector3(0, 4, 0), Lambertian(Color(0.2, 0.2, 1.0))),
        Quad(Point3(-2, 3, 1), Vector3(4, 0, 0), Vector3(0, 0, 4), Lambertian(Color(1.0, 0.5, 0.0))),
        Quad(Point3(-2, -3, 5), Vector3(4, 0, 0), Vector3(0, 0, -4), Lambertian(Color(0.2, 0.8, 0.8))),
    ])
    camera = _camera(camera_overrides,
                     aspect_ratio=1.0, image_width=400, samples_per_pixel=100, max_depth=50,
                     vfov=80, lookfrom=Point3(0, 0, 9), lookat=Point3(0, 0, 0), background=SKY)
    return world, camera


def simple_light(rng=random, **camera_overrides) -> Tuple[HittableList, Camera]:
    marble = Lambertian(NoiseTexture(4.0, rng))
    light = DiffuseLight(Color(4, 4, 4))
    world = HittableList([
        Plane(Vector3(0, 1, 0), Point3(0, 0, 0), marble),
        Sphere(Point3(0, 2, 0), 2, marble),
        Quad(Point3(3, 1, -2), Vector3(2, 0, 0), Vector3(0, 2, 0), light),
        Sphere(Point3(0, 7, 0), 2, light),
    ])
    camera = _camera(camera_overrides,
                     aspect_ratio=16.0 / 9.0, image_width=400, samples_per_pixel=100, max_depth=50,
                     vfov=20, lookfrom=Point3(26, 3, 6), lookat=Point3(0, 2, 0), background=BLACK)
    return world, camera


def _cornell_walls(world: HittableList, light: Quad):
    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))

    world.add(Quad(Point3(555, 0, 0), Vector3(0, 555, 0), Vector3(0, 0, 555), green))
    world.add(Quad(Point3(0, 0, 0), Vector3(0, 555, 0), Vector3(0, 0, 555), red))
    world.add(light)
    world.add(Quad(Point3(0, 0, 0), Vector3(555, 0, 0), Vector3(0, 0, 555), white))
    world.add(Quad(Point3(555, 555, 555), Vector3(-555, 0, 0), Vector3(0, 0, -555), white))
    world.add(Quad(Point3(0, 0, 555), Vector3(555, 0, 0), Vector3(0, 555, 0), white))
    return white


def _cornell_camera(overrides: dict) -> Camera:
    return _camera(overrides,
                   aspect_ratio=1.0, image_width=600, samples_per_pixel=200, max_depth=50,
                   vfov=40, lookfrom=Point3(278, 278, -800), lookat=Point3(278, 278, 0),
                   background=BLACK)


def cornell_box(rng=random, **camera_overrides) -> Tuple[HittableList, Camera]:
    world = HittableList()
    light = Quad(Point3(343, 554, 332), Vector3(-130, 0, 0), Vector3(0, 0, -105),
                 DiffuseLight(Color(15, 15, 15)))
    white = _cornell_walls(world, light)

    box1 = make_box(Point3(0, 0, 0), Point3(165, 330, 165), white)
    world.add(Translate(RotateY(box1, 15), Vector3(265, 0, 295)))

    box2 = make_box(Point3(0, 0, 0), Point3(165, 165, 165), white)
    world.add(Translate(RotateY(box2, -18), Vector3(130, 0, 65)))

    return world, _cornell_camera(camera_overrides)


def cornell_smoke(rng=random, **camera_overrides) -> Tuple[HittableList, Camera]:
    world = HittableList()
    light = Quad(Point3(113, 554, 127), Vector3(330, 0, 0), Vector3(0, 0, 305),
                 DiffuseLight(Color(7, 7, 7)))
    white = _cornell_walls(world, light)

    box1 = make_box(Point3(0, 0, 0), Point3(165, 330, 165), white)
    box1 = Translate(RotateY(box1, 15), Vector3(265, 0, 295))
    world.add(ConstantMedium(box1, 0.01, Color(0, 0, 0)))

    box2 = make_box(Point3(0, 0, 0), Point3(165, 165, 165), white)
    box2 = Translate(RotateY(box2, -18), Vector3(130, 0, 65))
    world.add(ConstantMedium(box2, 0.01, Color(1, 1, 1)))

    return HittableList([BVHNode(world.objects)]), _cornell_camera(camera_overrides)


def final_scene(rng=random, texture_path: str = DEFAULT_TEXTURE, **camera_overrides) -> Tuple[HittableList, Camera]:
    """Everything at once: boxes, motion blur, glass, fog, image and noise textures."""
    ground = Lambertian(Color(0.48, 0.83, 0.53))
    ground_boxes = HittableList()
    boxes_per_side = 20
    for i in range(boxes_per_side):
        for j in range(boxes_per_side):
            w = 100.0
            x0 = -1000.0 + i * w
            z0 = -1000.0 + j * w
            y1 = rng.uniform(1, 101)
            ground_boxes.add(make_box(Point3(x0, 0.0, z0), Point3(x0 + w, y1, z0 + w), ground))

    world = HittableList()
    world.add(BVHNode(ground_boxes.objects))

    light = DiffuseLight(Color(7, 7, 7))
    world.add(Quad(Point3(123, 554, 147), Vector3(300, 0, 0), Vector3(0, 0, 265), light))

    center1 = Point3(400, 400, 200)
    center2 = center1 + Vector3(30, 0, 0)
    world.add(Sphere.moving(center1, center2, 50, Lambertian(Color(0.7, 0.3, 0.1))))

    world.add(Sphere(Point3(260, 150, 45), 50, Dielectric(1.5)))
    world.add(Sphere(Point3(0, 150, 145), 50, Metal(Color(0.8, 0.8, 0.9), 0.2)))

    boundary = Sphere(Point3(360, 150, 145), 70, Dielectric(1.5))
    world.add(boundary)
    world.add(ConstantMedium(boundary, 0.2, Color(0.2, 0.4, 0.9)))
    mist = Sphere(Point3(0, 0, 0), 5000, Dielectric(1.5))
    world.add(ConstantMedium(mist, 0.0001, Color(1, 1, 1)))

    world.add(Sphere(Point3(400, 200, 400), 100, Lambertian(ImageTexture(texture_path))))
    world.add(Sphere(Point3(220, 280, 300), 80, Lambertian(NoiseTexture(0.2, rng))))

    white = Lambertian(Color(0.73, 0.73, 0.73))
    bubbles = HittableList()
    for _ in range(1000):
        bubbles.add(Sphere(Point3.random(rng, 0, 165), 10, white))
    world.add(Translate(RotateY(BVHNode(bubbles.objects), 15), Vector3(-100, 270, 395)))

    camera = _camera(camera_overrides,
                     aspect_ratio=1.0, image_width=400, samples_per_pixel=250, max_depth=4,
                     vfov=40, lookfrom=Point3(478, 278, -600), lookat=Point3(278, 278, 0),
                     background=BLACK)
    return world, camera


SCENES = {
    "bouncing-spheres": bouncing_spheres,
    "checkered-spheres": checkered_spheres,
    "earth": earth,
    "perlin-spheres": perlin_spheres,
    "quadrilaterals": quadrilaterals,
    "simple-light": simple_light,
    "cornell-box": cornell_box,
    "cornell-smoke": cornell_smoke,
    "final": final_scene,
}

# Scenes that load an image texture from disk.
TEXTURED_SCENES = {"earth", "final"}
