"""
Module: core.models.specs

Purpose:
    Cell descriptors produced by the partition and reveal planners, and
    the encoded output record.

Key Classes:
    - SliceSpec: Integer cell rectangle in cropped-buffer space
    - RevealSpec: A cell plus its enlarged output and source mapping
    - EncodedImage: One finished JPEG, tagged with its upload index

Dependencies:
    - dataclasses (std)

Used By:
    - slicing.partition: Builds SliceSpecs
    - slicing.reveal: Builds and renders RevealSpecs
    - imaging.encoder: Builds EncodedImages
    - output.zip_writer: Consumes EncodedImages
"""

from __future__ import annotations

from dataclasses import dataclass

from .mode import CellLabel


@dataclass(frozen=True, slots=True)
class SliceSpec:
    """
    One of the four output cells, in cropped-buffer pixels.

    Attributes:
        index: Upload position 1..4
        label: Semantic position (TOP_LEFT, TOP, ...)
        x: Left edge within the cropped buffer
        y: Top edge within the cropped buffer
        width: Cell width
        height: Cell height

    Example:
        >>> spec = SliceSpec(2, CellLabel.TOP_RIGHT, 500, 0, 500, 500)
        >>> spec.box
        (500, 0, 1000, 500)
    """
    index: int
    label: CellLabel
    x: int
    y: int
    width: int
    height: int

    def __post_init__(self) -> None:
        if not 1 <= self.index <= 4:
            raise ValueError(f"index must be 1..4: {self.index}")
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"cell {self.index} has empty size {self.width}x{self.height}"
            )

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def box(self) -> tuple[int, int, int, int]:
        """(left, top, right, bottom) tuple for PIL."""
        return (self.x, self.y, self.right, self.bottom)

    def overlaps(self, other: SliceSpec) -> bool:
        """True if the two cells share at least one pixel."""
        return not (
            self.right <= other.x
            or other.right <= self.x
            or self.bottom <= other.y
            or other.bottom <= self.y
        )


@dataclass(frozen=True, slots=True)
class RevealSpec:
    """
    Geometry for one extended-reveal output.

    Output-space values (output_*, extra_height, dest_*) are in
    cropped-buffer pixel units; src_* values are in original-image pixels.

    Attributes:
        cell: The tiled cell this output extends
        multiplier: Output height / cell height
        output_width: Canvas width (equals cell width)
        output_height: Canvas height (cell height * multiplier, rounded)
        extra_height: Padding added above and below the cell
        scale_x: Original-image pixels per cropped-buffer pixel, horizontally
        scale_y: Original-image pixels per cropped-buffer pixel, vertically
        src_x: Left edge of the cell in the original image
        src_y: Top edge of the cell in the original image
        src_w: Cell width in the original image
        src_h: Cell height in the original image
        extended_src_y: Top of the vertically extended source span
        extended_src_h: Height of the extended source span
        clamped_src_y: extended_src_y clamped to the image top
        clamped_src_bottom: Bottom of the extended span clamped to the image
    """
    cell: SliceSpec
    multiplier: float
    output_width: int
    output_height: int
    extra_height: float
    scale_x: float
    scale_y: float
    src_x: float
    src_y: float
    src_w: float
    src_h: float
    extended_src_y: float
    extended_src_h: float
    clamped_src_y: float
    clamped_src_bottom: float

    @property
    def index(self) -> int:
        return self.cell.index

    @property
    def extended_src_bottom(self) -> float:
        return self.extended_src_y + self.extended_src_h

    @property
    def clamped_src_h(self) -> float:
        """Height of source actually available (may be <= 0)."""
        return self.clamped_src_bottom - self.clamped_src_y

    @property
    def has_content(self) -> bool:
        """False when the whole extended span lies outside the image."""
        return self.clamped_src_h > 0

    @property
    def clipped_top(self) -> bool:
        return self.clamped_src_y > self.extended_src_y

    @property
    def clipped_bottom(self) -> bool:
        return self.clamped_src_bottom < self.extended_src_bottom

    @property
    def dest_y_offset(self) -> float:
        """Canvas row where composited content starts."""
        return (self.clamped_src_y - self.extended_src_y) / self.scale_y

    @property
    def dest_height(self) -> float:
        """Canvas rows covered by composited content."""
        return self.clamped_src_h / self.scale_y


@dataclass(frozen=True, slots=True)
class EncodedImage:
    """
    A finished output image (immutable).

    Attributes:
        index: Position 0..3 in the returned sequence
        data: Encoded bytes (a complete standalone file)
        width: Pixel width
        height: Pixel height
        format: PIL format name, e.g. "JPEG"
    """
    index: int
    data: bytes
    width: int
    height: int
    format: str = "JPEG"

    @property
    def upload_position(self) -> int:
        """1-based upload order."""
        return self.index + 1

    @property
    def extension(self) -> str:
        return "jpg" if self.format.upper() == "JPEG" else self.format.lower()

    @property
    def mime_type(self) -> str:
        return "image/jpeg" if self.format.upper() == "JPEG" else f"image/{self.format.lower()}"

    def filename(self, prefix: str = "") -> str:
        """
        File name in upload order.

        Example:
            >>> EncodedImage(0, b"", 1, 1).filename()
            '1.jpg'
            >>> EncodedImage(3, b"", 1, 1).filename("x-grid-")
            'x-grid-4.jpg'
        """
        return f"{prefix}{self.upload_position}.{self.extension}"

    def __repr__(self) -> str:
        return (
            f"EncodedImage(index={self.index}, {self.width}x{self.height}, "
            f"{len(self.data)} bytes)"
        )
