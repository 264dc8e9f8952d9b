import sys
import time
import argparse
from core.math import Vec3
from core.scene import RenderSettings
from core.ppm import write_ppm
from scene_builders.stack_scene_builder import SCENE_BUILDERS
from renderers.base_renderer import RendererFactory, format_elapsed

# renderer modules register themselves on import
import renderers.cpu_renderer
import renderers.numpy_renderer

LIGHT = Vec3(-5.0, -5.0, 10.0)
EYE = Vec3(0.0, 0.0, 2.0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Sphere-stack Phong ray tracer (PPM output)')
    parser.add_argument('--renderer', '-r',
                        choices=RendererFactory.list_available(),
                        default='cpu_raytracer',
                        help='renderer to use')
    parser.add_argument('--scene',
                        choices=sorted(SCENE_BUILDERS),
                        default='stack',
                        help='scene to render')
    parser.add_argument('--spheres', '-n', type=int, default=10,
                        help='number of spheres in the stack scene')
    parser.add_argument('--width', '-w', type=int, default=1024,
                        help='image width')
    parser.add_argument('--height', type=int, default=1024,
                        help='image height')
    parser.add_argument('--output', '-o', default='-',
                        help="output file; '-' writes P3 to stdout, non-.ppm paths are saved with PIL")
    return parser


def save_image(image, output: str):
    if output == '-':
        write_ppm(image, sys.stdout)
        sys.stdout.flush()
    elif output.lower().endswith('.ppm'):
        with open(output, 'w') as f:
            write_ppm(image, f)
    else:
        image.save(output)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = RenderSettings(width=args.width, height=args.height, light=LIGHT, eye=EYE)
        if args.scene == 'stack':
            scene_builder = SCENE_BUILDERS[args.scene](n_spheres=args.spheres)
        else:
            scene_builder = SCENE_BUILDERS[args.scene]()
    except ValueError as e:
        parser.error(str(e))

    print(f"Building scene: {args.scene}", file=sys.stderr)
    scene = scene_builder.build_scene()
    camera = scene_builder.create_camera(settings.eye)

    print(f"Renderer: {args.renderer}", file=sys.stderr)
    renderer = RendererFactory.create(args.renderer)
    print(f"Capabilities: {', '.join(renderer.get_capabilities())}", file=sys.stderr)

    start_time = time.time()
    image = renderer.render(scene, camera, settings)
    elapsed = time.time() - start_time

    save_image(image, args.output)
    print(f"Image written: {'<stdout>' if args.output == '-' else args.output}", file=sys.stderr)
    print(f"Total time: {format_elapsed(elapsed)}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
