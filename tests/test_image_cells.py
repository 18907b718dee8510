from tileshift.utils.image_cells import slice_image


def test_slice_image_row_major_regions():
    regions = slice_image(400, 400)
    assert len(regions) == 16
    assert [(r.x, r.y) for r in regions[:5]] == [(0, 0), (1, 0), (2, 0), (3, 0), (0, 1)]
    first = regions[0]
    assert (first.left, first.bottom, first.width, first.height) == (0, 300, 100, 100)
    last = regions[-1]
    assert (last.left, last.bottom) == (300, 0)


def test_slice_image_drops_remainder_pixels():
    regions = slice_image(403, 401)
    assert {(r.width, r.height) for r in regions} == {(100, 100)}
