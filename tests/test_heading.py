import math

import numpy as np
import pytest

from landmarks import make_landmarks
from tracking.heading import (HeadingEstimator, HeadingVector, MissingLandmark,
                              RIGHT_EAR_TRAGION)


def test_heading_is_nose_minus_ear_midpoint_times_sensitivity():
    landmarks = make_landmarks(nose=(0.55, 0.47, -0.05),
                               left_ear=(0.40, 0.50, 0.10),
                               right_ear=(0.60, 0.52, 0.30))
    heading = HeadingEstimator(sensitivity=20.0).estimate(landmarks)

    assert heading.x == pytest.approx((0.55 - 0.50) * 20.0)
    assert heading.y == pytest.approx((0.47 - 0.51) * 20.0)


def test_depth_is_ignored():
    near = make_landmarks(nose=(0.6, 0.5, -0.9))
    far = make_landmarks(nose=(0.6, 0.5, 0.9))
    estimator = HeadingEstimator()

    assert estimator.estimate(near) == estimator.estimate(far)


def test_heading_is_not_normalized():
    small = HeadingEstimator().estimate(make_landmarks(nose=(0.51, 0.5, 0.0)))
    large = HeadingEstimator().estimate(make_landmarks(nose=(0.55, 0.5, 0.0)))

    assert math.hypot(*large) == pytest.approx(5 * math.hypot(*small))


def test_sensitivity_scales_linearly():
    landmarks = make_landmarks(nose=(0.52, 0.46, 0.0))
    base = HeadingEstimator(sensitivity=1.0).estimate(landmarks)
    boosted = HeadingEstimator(sensitivity=40.0).estimate(landmarks)

    assert boosted.x == pytest.approx(base.x * 40.0)
    assert boosted.y == pytest.approx(base.y * 40.0)


def test_accepts_numpy_rows():
    landmarks = np.full((478, 3), 0.5)
    landmarks[1] = (0.6, 0.4, 0.0)
    landmarks[234] = (0.4, 0.5, 0.0)
    landmarks[454] = (0.6, 0.5, 0.0)

    heading = HeadingEstimator(sensitivity=10.0).estimate(landmarks)

    assert heading.x == pytest.approx(1.0)
    assert heading.y == pytest.approx(-1.0)
    assert isinstance(heading, HeadingVector)


def test_missing_right_ear_raises():
    landmarks = make_landmarks(size=RIGHT_EAR_TRAGION)

    with pytest.raises(MissingLandmark) as exc_info:
        HeadingEstimator().estimate(landmarks)

    assert exc_info.value.index == RIGHT_EAR_TRAGION
    assert exc_info.value.name == "RIGHT_EAR_TRAGION"


def test_none_landmark_raises():
    landmarks = make_landmarks()
    landmarks[1] = None

    with pytest.raises(MissingLandmark):
        HeadingEstimator().estimate(landmarks)


def test_missing_landmark_is_a_lookup_error():
    with pytest.raises(LookupError):
        HeadingEstimator().estimate([])
