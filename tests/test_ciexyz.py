import pytest

from prism import adobergb, cielab, ciexyy
from prism.ciexyz import (
    D50,
    D65,
    ChromaticAdaptation,
    Color,
    adapt_between_xyy_white_points,
    adapt_between_xyz_white_points,
    color_from_lab,
    color_from_v,
    color_from_xyy,
    transform_from_xyz_for_xyy_primaries,
    transform_to_xyz_for_xyy_primaries,
)
from prism.matrix import Vector3

P3_RED = ciexyy.Color(x=0.68, y=0.32, yy=1)
P3_GREEN = ciexyy.Color(x=0.265, y=0.69, yy=1)
P3_BLUE = ciexyy.Color(x=0.15, y=0.06, yy=1)


LAB_CASES = [
    (D50, (0, 0, 0), (0, 0, 0)),
    (D65, (0, 0, 0), (0, 0, 0)),
    (D50, (54.29, 80.81, 69.89), (0.4361, 0.2225, 0.0139)),
    (D65, (53.24, 80.09, 67.20), (0.4125, 0.2127, 0.0193)),
    (D50, (53.19, 0, 0), (0.2046, 0.2122, 0.1751)),
    (D65, (53.19, 0, 0), (0.2017, 0.2122, 0.2311)),
    (D50, (90.67, -50.67, -14.96), (0.5281, 0.7775, 0.8113)),
    (D65, (91.11, -48.09, -14.13), (0.5380, 0.7873, 1.0695)),
    (D50, (100, 0, 0), (0.9642, 1.0, 0.8252)),
    (D65, (100, 0, 0), (0.9505, 1.0, 1.0888)),
]


@pytest.mark.parametrize("white, lab_in, expected", LAB_CASES)
def test_color_from_lab(white, lab_in, expected):
    result = color_from_lab(cielab.Color(*lab_in), white)
    assert (result.x, result.y, result.z) == pytest.approx(expected, abs=0.01)


TO_LAB_CASES = [
    (D50, (0, 0, 0), (0, 0, 0)),
    (D65, (0, 0, 0), (0, 0, 0)),
    (D50, (0.4361, 0.2225, 0.0139), (54.291, 80.825, 69.922)),
    (D65, (0.4125, 0.2127, 0.0193), (53.244, 80.093, 67.239)),
    (D50, (0.2046, 0.2122, 0.1751), (53.19, 0, 0)),
    (D65, (0.2017, 0.2122, 0.2311), (53.19, 0, 0)),
    (D50, (0.5281, 0.7775, 0.8113), (90.666, -50.675, -14.972)),
    (D65, (0.5380, 0.7873, 1.0695), (91.11, -48.09, -14.13)),
    (D50, (0.9642, 1.0, 0.8252), (100, 0, 0)),
    (D65, (0.9505, 1.0, 1.0888), (100, 0, 0)),
]


@pytest.mark.parametrize("white, xyz_in, expected", TO_LAB_CASES)
def test_to_lab(white, xyz_in, expected):
    result = Color(*xyz_in).to_lab(white)
    assert (result.l, result.a, result.b) == pytest.approx(expected, abs=0.01)


@pytest.mark.parametrize(
    "xyy_in, expected", [(ciexyy.D50, D50), (ciexyy.D65, D65)]
)
def test_color_from_xyy(xyy_in, expected):
    result = color_from_xyy(xyy_in)
    assert (result.x, result.y, result.z) == pytest.approx(
        (expected.x, expected.y, expected.z), abs=0.0001
    )


def test_vector_round_trip():
    c = Color(0.25, 0.5, 0.75)
    assert c.to_v() == Vector3(0.25, 0.5, 0.75)
    assert color_from_v(c.to_v()) == c


def rows(transform):
    return [[transform[col][row] for col in range(3)] for row in range(3)]


def test_adobergb_from_xyz_matrix():
    t = transform_from_xyz_for_xyy_primaries(
        adobergb.PRIMARY_RED,
        adobergb.PRIMARY_GREEN,
        adobergb.PRIMARY_BLUE,
        adobergb.STANDARD_WHITE_POINT,
    )
    expected = [
        [2.0415913017647322, -0.5650078698012716, -0.34473195659062167],
        [-0.9692242864995342, 1.8759299885141114, 0.04155424903337176],
        [0.013446472278330708, -0.11838142234726094, 1.01533754937275],
    ]
    for actual_row, expected_row in zip(rows(t), expected):
        assert actual_row == pytest.approx(expected_row, abs=1e-12)


def test_adobergb_to_xyz_matrix():
    t = transform_to_xyz_for_xyy_primaries(
        adobergb.PRIMARY_RED,
        adobergb.PRIMARY_GREEN,
        adobergb.PRIMARY_BLUE,
        adobergb.STANDARD_WHITE_POINT,
    )
    expected = [
        [0.5766680793281725, 0.1855619421659935, 0.18819852398084014],
        [0.29734448781899253, 0.6273761097678748, 0.07527940241313279],
        [0.027031317880049893, 0.07069030664147563, 0.9911788223702592],
    ]
    for actual_row, expected_row in zip(rows(t), expected):
        assert actual_row == pytest.approx(expected_row, abs=1e-12)


def test_displayp3_from_xyz_matrix():
    t = transform_from_xyz_for_xyy_primaries(P3_RED, P3_GREEN, P3_BLUE, ciexyy.D65)
    expected = [
        [2.493509087331807, -0.931388074532663, -0.40271279318557973],
        [-0.8294731994547587, 1.7626305488413623, 0.0236242511428412],
        [0.03585127357050431, -0.07618395633732165, 0.9570295296681479],
    ]
    for actual_row, expected_row in zip(rows(t), expected):
        assert actual_row == pytest.approx(expected_row, abs=1e-12)


def test_displayp3_to_xyz_matrix():
    t = transform_to_xyz_for_xyy_primaries(P3_RED, P3_GREEN, P3_BLUE, ciexyy.D65)
    expected = [
        [0.48656856264244125, 0.2656727168458704, 0.19818726598669462],
        [0.22897344124350177, 0.6917516599220641, 0.07927489883443435],
        [0, 0.04511425370425419, 1.0437861931875305],
    ]
    for actual_row, expected_row in zip(rows(t), expected):
        assert actual_row == pytest.approx(expected_row, abs=1e-12)


def test_degenerate_primaries_raise():
    same = ciexyy.Color(x=0.3, y=0.3, yy=1)
    with pytest.raises(ValueError):
        transform_to_xyz_for_xyy_primaries(same, same, same, ciexyy.D65)


def test_adaptation_maps_source_white_to_destination_white():
    adaptation = adapt_between_xyy_white_points(ciexyy.D50, ciexyy.D65)
    assert isinstance(adaptation, ChromaticAdaptation)
    result = adaptation.apply(color_from_xyy(ciexyy.D50))
    target = color_from_xyy(ciexyy.D65)
    assert (result.x, result.y, result.z) == pytest.approx(
        (target.x, target.y, target.z), abs=1e-5
    )


def test_adaptation_between_same_white_is_identity():
    adaptation = adapt_between_xyz_white_points(D65, D65)
    result = adaptation.apply(Color(0.3, 0.4, 0.5))
    assert (result.x, result.y, result.z) == pytest.approx((0.3, 0.4, 0.5), abs=1e-6)


def test_adaptation_round_trip():
    forward = adapt_between_xyz_white_points(D50, D65)
    backward = adapt_between_xyz_white_points(D65, D50)
    result = backward.apply(forward.apply(Color(0.2, 0.6, 0.1)))
    assert (result.x, result.y, result.z) == pytest.approx((0.2, 0.6, 0.1), abs=1e-5)