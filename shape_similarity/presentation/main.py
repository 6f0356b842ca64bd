r"""형상 유사도 CLI 진입점.

실행: shape_similarity curve_a.yaml curve_b.yaml \\
        -c config.yaml --restrict_rotation_angle 0.3
"""

from __future__ import annotations

import argparse
import logging
import sys

from shape_similarity.domain.exceptions import ShapeSimilarityError
from shape_similarity.domain.value_objects.options import SimilarityOptions
from shape_similarity.infra.config.yaml_config_loader import YamlConfigLoader
from shape_similarity.infra.curve_io.curve_loader import load_curve
from shape_similarity.infra.transform.similarity_transform import (
    estimate_transform,
)
from shape_similarity.usecase.compare_shapes import CompareShapes

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='shape_similarity',
        description='Compare the shapes of two planar curves',
    )
    parser.add_argument(
        'curve_a', type=str,
        help='Path to the reference curve (YAML or JSON)',
    )
    parser.add_argument(
        'curve_b', type=str,
        help='Path to the curve to compare (YAML or JSON)',
    )
    parser.add_argument(
        '-c', '--config_file', type=str, default=None,
        help='Path to a config YAML file, default: packaged defaults',
    )
    parser.add_argument(
        '-n', '--estimation_points', type=int, default=None,
        help='Number of resampled points per curve',
    )
    parser.add_argument(
        '-r', '--rotations', type=int, default=None,
        help='Search iterations for a restricted rotation angle',
    )
    parser.add_argument(
        '--restrict_rotation_angle', type=float, default=None,
        help='Only consider rotations within [-ANGLE, ANGLE] radians',
    )
    parser.add_argument(
        '--details', action='store_true',
        help='Print the alignment angle, cost and sampling details',
    )
    parser.add_argument(
        '--transform', action='store_true',
        help='Print the similarity transform mapping curve_b onto curve_a',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Enable debug logging',
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """두 곡선 파일의 형상 유사도를 출력한다.

    Args:
        argv: 커맨드 라인 인자 (프로그램 이름 제외). None이면 sys.argv.

    Returns:
        종료 코드. 성공 0, 입력/옵션 오류 1.
    """
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='[%(name)s] %(levelname)s: %(message)s',
    )

    options = SimilarityOptions(
        estimation_points=args.estimation_points,
        rotations=args.rotations,
        restrict_rotation_angle=args.restrict_rotation_angle,
    )

    try:
        config = YamlConfigLoader(args.config_file).load()
        curve_a = load_curve(args.curve_a)
        curve_b = load_curve(args.curve_b)
        result = CompareShapes(config).execute(curve_a, curve_b, options)
        transform = (
            estimate_transform(
                curve_b, curve_a, result.estimation_points
            )
            if args.transform
            else None
        )
    except ShapeSimilarityError as e:
        logger.error('%s', e)
        return 1

    print(f'{result.similarity:.6f}')
    if args.details:
        print(f'theta: {result.theta:.6f}')
        print(f'cost: {result.cost:.6f}')
        print(f'estimation_points: {result.estimation_points}')
        print(f'rotation_mode: {result.rotation_mode}')
    if transform is not None:
        print(f'rotation: {transform.rotation:.6f}')
        print(f'scale: {transform.scale:.6f}')
        print(
            f'translation: {transform.translation[0]:.6f} '
            f'{transform.translation[1]:.6f}'
        )
        print(f'mse: {transform.mse:.6f}')
    return 0


if __name__ == '__main__':
    sys.exit(main())
