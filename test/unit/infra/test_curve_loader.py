"""load_curve 유닛 테스트."""

import json

import pytest

from shape_similarity.domain.exceptions import InvalidCurveError
from shape_similarity.domain.value_objects.point import Point
from shape_similarity.infra.curve_io.curve_loader import load_curve


class TestLoadCurve:
    def test_list_of_pairs(self, tmp_path):
        path = tmp_path / 'curve.yaml'
        path.write_text('- [0, 0]\n- [2, 4]\n- [18, -3]\n')

        curve = load_curve(path)

        assert curve == (Point(0, 0), Point(2, 4), Point(18, -3))

    def test_curve_key_with_mappings(self, tmp_path):
        path = tmp_path / 'curve.yaml'
        path.write_text(
            'curve:\n'
            '  - {x: 0.5, y: 1}\n'
            '  - {x: 1.5, y: 2}\n'
        )

        assert load_curve(str(path)) == (Point(0.5, 1), Point(1.5, 2))

    def test_points_key_json(self, tmp_path):
        path = tmp_path / 'curve.json'
        path.write_text(json.dumps({'points': [[0, 0], [4, 4]]}))

        assert load_curve(path) == (Point(0, 0), Point(4, 4))

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidCurveError, match='읽을 수 없습니다'):
            load_curve(tmp_path / 'missing.yaml')

    def test_unparseable_file(self, tmp_path):
        path = tmp_path / 'broken.yaml'
        path.write_text('[1, 2')

        with pytest.raises(InvalidCurveError, match='파싱 실패'):
            load_curve(path)

    def test_mapping_without_curve_key(self, tmp_path):
        path = tmp_path / 'other.yaml'
        path.write_text('name: triangle\n')

        with pytest.raises(InvalidCurveError, match='curve/points'):
            load_curve(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text('')

        with pytest.raises(InvalidCurveError, match='비어있습니다'):
            load_curve(path)

    def test_too_few_points(self, tmp_path):
        path = tmp_path / 'short.yaml'
        path.write_text('- [0, 0]\n')

        with pytest.raises(InvalidCurveError):
            load_curve(path)

    def test_scalar_content(self, tmp_path):
        path = tmp_path / 'scalar.yaml'
        path.write_text('just a string')

        with pytest.raises(InvalidCurveError):
            load_curve(path)
