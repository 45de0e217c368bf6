# main.py
import argparse
import random
import sys
from rayonetta.materials import ImageDecodeError
from rayonetta.renderer import BACKENDS, Renderer, save_image, write_ppm
from rayonetta.scenes import DEFAULT_TEXTURE, SCENES, TEXTURED_SCENES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rayonetta",
                                     description="Monte-Carlo path tracer demo scenes")
    parser.add_argument('--scene', '-S', choices=sorted(SCENES), default='bouncing-spheres',
                        help='scene to render')
    parser.add_argument('--width', '-w', type=int, default=None,
                        help='image width in pixels (scene default if omitted)')
    parser.add_argument('--samples', '-s', type=int, default=None,
                        help='samples per pixel')
    parser.add_argument('--depth', '-d', type=int, default=None,
                        help='maximum number of bounces per path')
    parser.add_argument('--workers', '-j', type=int, default=None,
                        help='parallel workers (default: one per CPU)')
    parser.add_argument('--backend', choices=BACKENDS, default='process',
                        help='run rows in worker processes or threads')
    parser.add_argument('--seed', type=int, default=None,
                        help='seed for scene layout and sampling; fixed seeds give identical images')
    parser.add_argument('--texture', default=DEFAULT_TEXTURE,
                        help='image used by the textured scenes')
    parser.add_argument('--output', '-o', default=None,
                        help='output file (.ppm, .png, ...); PPM on stdout if omitted')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='do not report progress on stderr')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    builder = SCENES[args.scene]
    scene_args = {"texture_path": args.texture} if args.scene in TEXTURED_SCENES else {}
    try:
        world, camera = builder(random.Random(args.seed),
                                image_width=args.width,
                                samples_per_pixel=args.samples,
                                max_depth=args.depth,
                                **scene_args)
    except (FileNotFoundError, ImageDecodeError) as e:
        print(f"Error building scene {args.scene!r}: {e}", file=sys.stderr)
        return 1

    try:
        camera.initialize()
        renderer = Renderer(workers=args.workers, backend=args.backend,
                            seed=args.seed, progress=not args.quiet)
    except ValueError as e:
        print(f"Invalid render settings: {e}", file=sys.stderr)
        return 2

    image = renderer.render(camera, world)

    if args.output is None:
        write_ppm(image, sys.stdout)
    else:
        save_image(image, args.output)
        if not args.quiet:
            print(f"Saved {args.output}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
