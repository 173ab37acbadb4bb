#
# PROJECT: triangle-rasterizer
# MODULE: triangle_rasterizer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from dataclasses import dataclass

from .color import Color, RED, GREEN, BLUE
from .errors import InvalidVertexError
from .geometry import Point
from .triangle import Triangle


@dataclass
class RasterConfig:
    """Parameters for one rasterization run."""
    filename: str
    vertex_1: Point
    vertex_2: Point
    vertex_3: Point
    width: int = 512
    height: int = 512
    color_1: Color = RED
    color_2: Color = GREEN
    color_3: Color = BLUE
    workers: int = 1

    @property
    def vertices(self):
        return (self.vertex_1, self.vertex_2, self.vertex_3)

    def validate(self) -> 'RasterConfig':
        """
        Check every vertex lies on the canvas, i.e. 0 <= x < width and
        0 <= y < height. Raises InvalidVertexError on the first offender.
        """
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Image dimensions must be positive, got {self.width}x{self.height}")
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")

        for i, v in enumerate(self.vertices, start=1):
            if v.x >= self.width:
                raise InvalidVertexError(
                    f"Vertex {i}: given x: {v.x} is greater than the "
                    f"largest image x: {self.width - 1}")
            if v.y >= self.height:
                raise InvalidVertexError(
                    f"Vertex {i}: given y: {v.y} is greater than the "
                    f"largest image y: {self.height - 1}")
        return self

    def triangle(self) -> Triangle:
        return Triangle(self.vertex_1, self.vertex_2, self.vertex_3,
                        self.color_1, self.color_2, self.color_3)

    @classmethod
    def from_args(cls, args) -> 'RasterConfig':
        """Build a config from an argparse namespace (see cli.parse_args)."""
        return cls(
            filename=args.filename,
            vertex_1=args.vertex_1,
            vertex_2=args.vertex_2,
            vertex_3=args.vertex_3,
            width=args.width,
            height=args.height,
            color_1=args.color_1,
            color_2=args.color_2,
            color_3=args.color_3,
            workers=args.workers,
        )
