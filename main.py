"""
pHash Studio
64-bit DCT perceptual hash for near-duplicate image detection
"""

import logging
import sys
import warnings

warnings.filterwarnings('ignore', category=RuntimeWarning)

USAGE = """\
Usage: python main.py <image_path> [--method direct|scipy] [--interp NAME] [--verbose]
       python main.py --synthetic <solid|single_pixel|gradient|checkerboard> [options]"""


def parse_args(args):
    """Split argv into a source and HashParams keyword arguments."""
    options = {'source': None, 'synthetic': None, 'verbose': False, 'params': {}}

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in ('--method', '--interp', '--synthetic'):
            if i + 1 >= len(args):
                raise ValueError(f"{arg} needs a value")
            value = args[i + 1]
            if arg == '--method':
                options['params']['dct_method'] = value
            elif arg == '--interp':
                options['params']['interpolation'] = value
            else:
                options['synthetic'] = value
            i += 2
            continue
        if arg in ('-v', '--verbose'):
            options['verbose'] = True
        elif arg.startswith('-'):
            raise ValueError(f"Unknown option: {arg}")
        elif options['source'] is None:
            options['source'] = arg
        else:
            raise ValueError(f"Unexpected argument: {arg}")
        i += 1

    if (options['source'] is None) == (options['synthetic'] is None):
        raise ValueError("Give exactly one of <image_path> or --synthetic <key>")
    return options


def run_cli(args) -> int:
    """Hash one image and print the result."""
    from models.hash_params import HashParams
    from engines.pipeline import phash_pipeline
    from engines.preprocess import PreprocessingError, decode_image
    from utils.image_io import read_image_bytes
    from utils.test_images import generate_demo_image

    if not args or args[0] in ('-h', '--help'):
        print(USAGE)
        return 0

    try:
        options = parse_args(args)
        params = HashParams(**options['params'])
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if options['verbose'] else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    if options['synthetic'] is not None:
        image = generate_demo_image(options['synthetic'])
        if image is None:
            print(f"Error: unknown synthetic image '{options['synthetic']}'", file=sys.stderr)
            return 2
        print(f"Generating test image: {options['synthetic']}")
    else:
        print(f"Loading: {options['source']}")
        try:
            image = decode_image(read_image_bytes(options['source']))
        except (OSError, PreprocessingError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    print(f"Image: {image.shape[1]}x{image.shape[0]}")
    print(f"DCT:   {params.dct_method}, resize: {params.interpolation}")

    try:
        result, _ = phash_pipeline(image, params)
    except PreprocessingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("\n=== Result ===")
    print(f"pHash:   {result.hash_hex}")
    print(f"Mean:    {result.mean:.4f}")
    print(f"Time:    {result.total_time_ms:.2f} ms "
          f"(preprocess {result.preprocess_time_ms:.2f}, hash {result.hash_time_ms:.2f})")
    return 0


def main():
    sys.exit(run_cli(sys.argv[1:]))


if __name__ == '__main__':
    main()
