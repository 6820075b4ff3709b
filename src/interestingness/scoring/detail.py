"""Detail pass: Laplacian edge response on luminance."""

from __future__ import annotations

from interestingness.raster import Raster, to_channel
from interestingness.scoring.color import luminance

# Channel of the output raster holding the detail measure
DETAIL_CHANNEL = 1


def edge_detect(source: Raster, output: Raster) -> None:
    """Write the detail measure into the output raster's green channel.

    Interior pixels get the 4-neighbour Laplacian of luminance
    (4*center - north - west - east - south). Border pixels have no
    full neighbourhood and get their own luminance instead.

    Args:
        source: Input raster (read only).
        output: Raster of the same size; only channel 1 is written.
    """
    lum = luminance(source[..., 0], source[..., 1], source[..., 2])

    detail = lum.copy()
    detail[1:-1, 1:-1] = (
        4 * lum[1:-1, 1:-1]
        - lum[:-2, 1:-1]
        - lum[1:-1, :-2]
        - lum[1:-1, 2:]
        - lum[2:, 1:-1]
    )

    output[..., DETAIL_CHANNEL] = to_channel(detail)
