"""Document engine adapter: turns PDF bytes into typed operator streams.

pikepdf does the parsing. This module only maps its content stream
instructions onto the :mod:`printcheck.models` operator types and reports
engine failures with its own exceptions.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from decimal import Decimal

import pikepdf

from printcheck.models import (
    Operator,
    OtherOperator,
    PageGeometry,
    PaintImage,
    Rectangle,
    SetFillColor,
    SetStrokeColor,
)
from printcheck.utils.color import COMPONENTS, to_rgb

logger = logging.getLogger(__name__)

_MAX_FORM_DEPTH = 12

_DEVICE_SPACES = {
    "/DeviceGray": "gray",
    "/G": "gray",
    "/CalGray": "gray",
    "/DeviceRGB": "rgb",
    "/RGB": "rgb",
    "/CalRGB": "rgb",
    "/DeviceCMYK": "cmyk",
    "/CMYK": "cmyk",
}

_ICC_COMPONENTS = {1: "gray", 3: "rgb", 4: "cmyk"}

# Operators that set a color directly, with the space they imply.
_DIRECT_FILL = {"g": "gray", "rg": "rgb", "k": "cmyk"}
_DIRECT_STROKE = {"G": "gray", "RG": "rgb", "K": "cmyk"}


class PasswordRequired(Exception):
    """The document is encrypted and cannot be opened without a password."""


class CorruptDocument(Exception):
    """The bytes could not be parsed as a PDF."""


class MalformedOperator(ValueError):
    """A recognised operator carried missing or non-numeric operands."""


def open_document(data: bytes) -> PrintDocument:
    """Open *data* as a PDF document."""
    try:
        pdf = pikepdf.open(io.BytesIO(data))
    except pikepdf.PasswordError as exc:
        raise PasswordRequired(str(exc)) from exc
    except pikepdf.PdfError as exc:
        raise CorruptDocument(str(exc)) from exc
    return PrintDocument(pdf)


class PrintDocument:
    """An open PDF. Use as a context manager or call :meth:`close`."""

    def __init__(self, pdf: pikepdf.Pdf) -> None:
        self._pdf = pdf

    @property
    def page_count(self) -> int:
        return len(self._pdf.pages)

    def get_page(self, index: int) -> PrintPage:
        """Return page *index*, counting from 1."""
        if not 1 <= index <= self.page_count:
            raise IndexError(
                f"Page {index} out of range (document has {self.page_count} page(s))"
            )
        return PrintPage(self._pdf.pages[index - 1])

    def close(self) -> None:
        self._pdf.close()

    def __enter__(self) -> PrintDocument:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class PrintPage:
    """One page of a :class:`PrintDocument`."""

    def __init__(self, page: pikepdf.Page) -> None:
        self._page = page

    def geometry(self) -> PageGeometry:
        x0, y0, x1, y1 = (float(v) for v in self._page.mediabox)
        return PageGeometry(width=abs(x1 - x0), height=abs(y1 - y0))

    def operator_stream(self) -> tuple[Operator, ...]:
        """Decode the page content into operators, in stream order.

        Form XObjects are expanded in place.
        """
        resources = self._page.obj.get("/Resources", pikepdf.Dictionary())
        decoder = _StreamDecoder()
        decoder.decode(self._page, resources, depth=0)
        return tuple(decoder.operators)


@dataclass
class _ColorSpaces:
    fill: str | None = "gray"
    stroke: str | None = "gray"


class _StreamDecoder:
    """Walks content streams, tracking the color space state they rely on."""

    def __init__(self) -> None:
        self.operators: list[Operator] = []
        self._spaces = _ColorSpaces()
        self._saved: list[_ColorSpaces] = []
        self._open_forms: set[tuple[int, int]] = set()

    def decode(
        self,
        content: pikepdf.Page | pikepdf.Stream,
        resources: pikepdf.Dictionary,
        depth: int,
    ) -> None:
        for operands, operator in pikepdf.parse_content_stream(content):
            self._decode_instruction(list(operands), str(operator), resources, depth)

    def _decode_instruction(
        self,
        operands: list,
        op: str,
        resources: pikepdf.Dictionary,
        depth: int,
    ) -> None:
        if op == "q":
            self._saved.append(_ColorSpaces(self._spaces.fill, self._spaces.stroke))
        elif op == "Q":
            if self._saved:
                self._spaces = self._saved.pop()

        elif op in _DIRECT_FILL:
            self._spaces.fill = _DIRECT_FILL[op]
            r, g, b = to_rgb(_numbers(operands, COMPONENTS[self._spaces.fill], op),
                             self._spaces.fill)
            self.operators.append(SetFillColor(r, g, b))
            return
        elif op in _DIRECT_STROKE:
            self._spaces.stroke = _DIRECT_STROKE[op]
            r, g, b = to_rgb(_numbers(operands, COMPONENTS[self._spaces.stroke], op),
                             self._spaces.stroke)
            self.operators.append(SetStrokeColor(r, g, b))
            return

        elif op == "cs" and operands:
            self._spaces.fill = _resolve_color_space(operands[0], resources)
        elif op == "CS" and operands:
            self._spaces.stroke = _resolve_color_space(operands[0], resources)
        elif op in ("sc", "scn") and self._spaces.fill is not None:
            space = self._spaces.fill
            r, g, b = to_rgb(_numbers(operands, COMPONENTS[space], op), space)
            self.operators.append(SetFillColor(r, g, b))
            return
        elif op in ("SC", "SCN") and self._spaces.stroke is not None:
            space = self._spaces.stroke
            r, g, b = to_rgb(_numbers(operands, COMPONENTS[space], op), space)
            self.operators.append(SetStrokeColor(r, g, b))
            return

        elif op == "re":
            x, y, width, height = _numbers(operands, 4, op)
            self.operators.append(Rectangle(x, y, width, height))
            return

        elif op == "Do" and operands:
            if self._paint_xobject(operands[0], resources, depth):
                return

        elif op == "INLINE IMAGE" and operands:
            iimage = operands[0]
            self.operators.append(
                PaintImage(int(iimage.width), int(iimage.height))
            )
            return

        self.operators.append(OtherOperator(op))

    def _paint_xobject(
        self, name: pikepdf.Object, resources: pikepdf.Dictionary, depth: int
    ) -> bool:
        """Handle ``Do``. Returns True if operators were emitted for it."""
        xobjects = resources.get("/XObject")
        key = str(name)
        if xobjects is None or key not in xobjects:
            logger.debug("Do references unknown XObject %s", key)
            return False

        xobj = xobjects[key]
        subtype = str(xobj.get("/Subtype", ""))
        if subtype == "/Image":
            self.operators.append(
                PaintImage(int(xobj.get("/Width", 0)), int(xobj.get("/Height", 0)))
            )
            return True
        if subtype != "/Form":
            return False

        objgen = xobj.objgen
        if depth >= _MAX_FORM_DEPTH or objgen in self._open_forms:
            logger.debug("Skipping nested form XObject %s at depth %d", key, depth)
            return False

        # A form runs inside an implicit q/Q pair
        outer = _ColorSpaces(self._spaces.fill, self._spaces.stroke)
        saved_depth = len(self._saved)
        self._open_forms.add(objgen)
        try:
            self.decode(xobj, xobj.get("/Resources", resources), depth + 1)
        finally:
            del self._saved[saved_depth:]
            self._spaces = outer
            self._open_forms.discard(objgen)
        return True


def _numbers(operands: list, count: int, op: str) -> list[float]:
    """Return the first *count* operands as floats."""
    if len(operands) < count:
        raise MalformedOperator(
            f"'{op}' expects {count} operand(s), got {len(operands)}"
        )
    values = operands[:count]
    # pikepdf hands back PDF integers as int and reals as Decimal
    if not all(isinstance(v, (int, float, Decimal)) and not isinstance(v, bool) for v in values):
        raise MalformedOperator(f"'{op}' has non-numeric operands")
    return [float(v) for v in values]


def _resolve_color_space(
    operand: pikepdf.Object, resources: pikepdf.Dictionary
) -> str | None:
    """Map a ``cs``/``CS`` operand to gray, rgb or cmyk (None if unsupported)."""
    name = str(operand)
    if name in _DEVICE_SPACES:
        return _DEVICE_SPACES[name]

    spaces = resources.get("/ColorSpace")
    if spaces is None or name not in spaces:
        return None
    return _color_space_kind(spaces[name])


def _color_space_kind(obj: pikepdf.Object) -> str | None:
    if isinstance(obj, pikepdf.Name):
        return _DEVICE_SPACES.get(str(obj))
    if not isinstance(obj, pikepdf.Array) or len(obj) == 0:
        return None

    family = str(obj[0])
    if family == "/ICCBased" and len(obj) > 1:
        return _ICC_COMPONENTS.get(int(obj[1].get("/N", 0)))
    return _DEVICE_SPACES.get(family)
