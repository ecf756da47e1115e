"""
Vegetation Change Detection
Before/after satellite image comparison with a greenness proxy index
"""

import logging
import sys

logger = logging.getLogger(__name__)

USAGE = (
    "Usage: python main.py <before_image> <after_image> [threshold] [output.png]\n"
    "       python main.py --synthetic [clearing|regrowth|stable] [threshold]"
)


def _parse_threshold(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        print(f"Invalid threshold: {value}")
        sys.exit(2)


def run_cli(args):
    """Compare two images (or a synthetic pair) and write the change map."""
    from models.detection_params import DetectionParams
    from models.errors import PipelineError
    from engines.pipeline import ChangeDetectionPipeline
    from utils.image_io import load_image_bytes, save_image_bytes, encode_rgb
    from utils.test_images import generate_demo_pair

    if not args or args[0] == '--help':
        print(USAGE)
        sys.exit(0)

    output_path = "change_map.png"
    threshold = None

    if args[0] == '--synthetic':
        key = args[1] if len(args) > 1 else "clearing"
        pair = generate_demo_pair(key)
        if pair is None:
            print(f"Unknown synthetic scene: {key}")
            sys.exit(2)
        print(f"Generating synthetic '{key}' pair...")
        before, after = (encode_rgb(image) for image in pair)
        if len(args) > 2:
            threshold = _parse_threshold(args[2])
    else:
        if len(args) < 2:
            print(USAGE)
            sys.exit(2)
        print(f"Loading: {args[0]}")
        before = load_image_bytes(args[0])
        print(f"Loading: {args[1]}")
        after = load_image_bytes(args[1])
        if len(args) > 2:
            threshold = _parse_threshold(args[2])
        if len(args) > 3:
            output_path = args[3]

    params = DetectionParams()
    if threshold is not None:
        try:
            params = params.with_threshold(threshold)
        except ValueError as e:
            print(f"Invalid threshold: {e}")
            sys.exit(2)

    print(f"Canonical size: {params.canonical_width}x{params.canonical_height}")
    print(f"Loss threshold: {params.loss_threshold}")

    try:
        result = ChangeDetectionPipeline(params).run(before, after)
    except PipelineError as e:
        logger.error(f"Change detection failed: {e}")
        sys.exit(1)

    if not result.has_data:
        print("\n=== No imagery available ===")
        print(f"Placeholder inputs: {', '.join(result.placeholder_inputs)}")
        return

    print("\n=== Results ===")
    print(f"Loss:      {result.loss_percent:.2f}%")
    print(f"Pixels:    {result.loss_pixel_count} / {result.total_pixel_count}")
    print(f"Severity:  {result.severity}")
    print(f"Index:     before {result.index_stats['before']['mean']:+.3f}, "
          f"after {result.index_stats['after']['mean']:+.3f} (mean)")
    print(f"Time:      {sum(result.timings_ms.values()):.2f} ms")

    save_image_bytes(result.visualization_image, output_path)
    print(f"\nSaved: {output_path}")


def main():
    from utils.logging_config import configure_logging

    configure_logging("INFO")
    run_cli(sys.argv[1:])


if __name__ == '__main__':
    main()
