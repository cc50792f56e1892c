"""End-to-end tests for the optimization pipeline."""

import math

import pytest

from galvopath.config import OptimizerSettings
from galvopath.core import Optimizer, turning_angle
from galvopath.domain import Frame, Graphic, LaserPoint, Shape
from galvopath.exceptions import InvalidTravelError, PipelineError


def zero_settings(**overrides) -> OptimizerSettings:
    """Create settings that insert nothing unless overridden."""
    values = {
        "analyze_corner_angles": False,
        "extra_blank_points_start": 0,
        "extra_blank_points_end": 0,
        "extra_corner_points": 0,
        "extra_corner_points_start": 0,
        "extra_corner_points_end": 0,
        "extra_corner_points_angle_dependent": 0,
        "max_travel": math.inf,
    }
    values.update(overrides)
    return OptimizerSettings(**values)


@pytest.fixture
def triangle() -> Graphic:
    """Create a graphic with one triangle of corner points."""
    return Graphic([[
        LaserPoint(0, 0, is_corner=True),
        LaserPoint(100, 0, is_corner=True),
        LaserPoint(50, 80, is_corner=True),
    ]])


class ReversingReorderer:
    """Test strategy that draws shapes in reverse order."""

    def __init__(self) -> None:
        self.calls = 0

    def reorder(self, graphic: Graphic) -> Graphic:
        self.calls += 1
        return Graphic(reversed(graphic.shapes))


class FailingReorderer:
    """Test strategy that always fails."""

    def reorder(self, graphic: Graphic) -> Graphic:
        raise RuntimeError("boom")


class TestOptimizerScenarios:
    """End-to-end scenarios."""

    def test_triangle_without_extras(self, triangle: Graphic):
        """Test a triangle gives its points bracketed by two blanks."""
        optimizer = Optimizer(zero_settings())
        optimizer.optimize(triangle)
        frame = optimizer.optimized_frame()

        p0, p1, p2 = triangle.shapes[0].points
        assert len(frame) == 5
        assert list(frame) == [
            p0.blanked(),
            p0,
            p1.with_turning_angle(turning_angle(p0, p1, p2)),
            p2,
            p2.blanked(),
        ]

    def test_duplicate_point_removed(self):
        """Test coincident consecutive points lose the second one."""
        graphic = Graphic([[LaserPoint(0, 0), LaserPoint(10, 0), LaserPoint(10, 0), LaserPoint(20, 5)]])
        optimizer = Optimizer(zero_settings())
        optimizer.optimize(graphic)

        assert optimizer.last_graphic is not None
        assert len(optimizer.last_graphic.shapes[0]) == 3
        assert len(optimizer.optimized_frame()) == 3 + 2

    def test_long_corner_jump_subdivided(self):
        """Test two corners 100 apart at max travel 30 get three points between them."""
        a = LaserPoint(0, 0, is_corner=True)
        b = LaserPoint(100, 0, is_corner=True)
        optimizer = Optimizer(zero_settings(max_travel=30.0))
        optimizer.optimize(Graphic([[a, b]]))
        frame = optimizer.optimized_frame()

        # blank(a), a, 25, 50, 75, b, blank(b)
        assert len(frame) == 7
        assert [p.x for p in frame[2:5]] == [25.0, 50.0, 75.0]
        assert frame[5].to_tuple() == b.to_tuple()
        assert frame[6].is_blanked

    def test_single_blanked_point_shape(self):
        """Test a shape of one blanked point takes the end count everywhere."""
        graphic = Graphic([[LaserPoint(3, 3, is_blanked=True)]])
        optimizer = Optimizer(zero_settings(extra_blank_points_start=2, extra_blank_points_end=5))
        optimizer.optimize(graphic)

        # Three blanked samples, each followed by a blank or nothing: 3 * (5 + 1)
        assert len(optimizer.optimized_frame()) == 18
        assert all(p.is_blanked for p in optimizer.optimized_frame())


class TestOptimizer:
    """Tests for Optimizer class."""

    def test_empty_before_optimize(self):
        """Test no result is available before the first run."""
        assert len(Optimizer().optimized_frame()) == 0
        assert Optimizer().last_graphic is None

    @pytest.mark.parametrize("graphic", [Graphic(), Graphic([Shape(), Shape()])])
    def test_empty_graphic(self, graphic: Graphic):
        """Test empty input optimizes to an empty frame."""
        optimizer = Optimizer()
        optimizer.optimize(graphic)
        assert optimizer.optimized_frame() == Frame()

    def test_input_not_modified(self, triangle: Graphic):
        """Test the caller's graphic survives repeated runs."""
        snapshot = Graphic(triangle.shapes)
        optimizer = Optimizer()
        optimizer.optimize(triangle)
        optimizer.optimize(triangle)
        assert triangle == snapshot

    def test_rerun_with_other_settings(self, triangle: Graphic):
        """Test a graphic can be reused with different settings."""
        optimizer = Optimizer(zero_settings())
        optimizer.optimize(triangle)
        plain = len(optimizer.optimized_frame())

        optimizer.set_settings_ref(zero_settings(extra_corner_points=4))
        optimizer.optimize(triangle)
        assert len(optimizer.optimized_frame()) == plain + 4

    def test_settings_is_live_handle(self, triangle: Graphic):
        """Test changes through settings() apply to the next run."""
        optimizer = Optimizer(zero_settings())
        optimizer.settings().max_travel = 10.0
        optimizer.optimize(triangle)

        assert optimizer.settings().max_travel == 10.0
        assert optimizer.last_stats.travel_points_added > 0

    def test_set_settings_ref_keeps_reference(self):
        """Test the optimizer keeps the given object, not a copy."""
        settings = zero_settings()
        optimizer = Optimizer()
        optimizer.set_settings_ref(settings)
        assert optimizer.settings() is settings

    def test_result_replaced(self, triangle: Graphic):
        """Test each run discards the previous result."""
        optimizer = Optimizer(zero_settings())
        optimizer.optimize(triangle)
        optimizer.optimize(Graphic())
        assert len(optimizer.optimized_frame()) == 0

    def test_reorderer_only_runs_when_enabled(self):
        """Test the reordering stage follows reorder_frame."""
        graphic = Graphic([[LaserPoint(0, 0)], [LaserPoint(9, 9)]])
        reorderer = ReversingReorderer()
        optimizer = Optimizer(zero_settings(), reorderer=reorderer)

        optimizer.optimize(graphic)
        assert reorderer.calls == 0
        assert optimizer.optimized_frame()[1].to_tuple() == (0, 0)

        optimizer.settings().reorder_frame = True
        optimizer.optimize(graphic)
        assert reorderer.calls == 1
        assert optimizer.optimized_frame()[1].to_tuple() == (9, 9)

    def test_unexpected_stage_error_wrapped(self):
        """Test unexpected failures name the stage."""
        optimizer = Optimizer(zero_settings(reorder_frame=True), reorderer=FailingReorderer())

        with pytest.raises(PipelineError) as exc_info:
            optimizer.optimize(Graphic([[LaserPoint(0, 0)]]))
        assert exc_info.value.stage == "reorder"

    def test_failed_run_clears_last_graphic(self, triangle: Graphic):
        """Test a failed run leaves no graphic from an earlier run."""
        optimizer = Optimizer(zero_settings(), reorderer=FailingReorderer())
        optimizer.optimize(triangle)
        assert optimizer.last_graphic is not None

        optimizer.settings().reorder_frame = True
        with pytest.raises(PipelineError):
            optimizer.optimize(triangle)
        assert optimizer.last_graphic is None
        assert len(optimizer.optimized_frame()) == 0

    def test_invalid_travel_surfaces(self, triangle: Graphic):
        """Test a travel limit that bypassed validation fails the run."""
        optimizer = Optimizer(OptimizerSettings.model_construct(max_travel=0.0))

        with pytest.raises(InvalidTravelError):
            optimizer.optimize(triangle)
        assert len(optimizer.optimized_frame()) == 0

    def test_stats(self, triangle: Graphic):
        """Test statistics cover every stage that ran."""
        optimizer = Optimizer(zero_settings(extra_corner_points=1))
        optimizer.optimize(triangle)
        stats = optimizer.last_stats

        assert list(stats.stage_points) == ["deduplicate", "flatten", "enhance", "interpolate"]
        assert stats.input_shapes == 1
        assert stats.input_points == 3
        assert stats.stage_points["flatten"] == 5
        assert stats.dwell_points_added == 1
        assert stats.output_points == len(optimizer.optimized_frame())
