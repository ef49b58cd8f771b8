"""Generate synthetic test PDFs for analyzer testing using pikepdf and reportlab."""

from __future__ import annotations

import zlib
from pathlib import Path

import pikepdf
from pikepdf import Array, Dictionary, Name

CORPUS_DIR = Path(__file__).parent.parent / "corpus"

PAGE_WIDTH = 800
PAGE_HEIGHT = 600


def generate_all() -> dict[str, Path]:
    """Generate all test PDFs. Returns {name: path} dict."""
    CORPUS_DIR.mkdir(parents=True, exist_ok=True)
    return {
        "plain": generate_plain_pdf(CORPUS_DIR),
        "blank": generate_blank_pdf(CORPUS_DIR),
        "color": generate_color_pdf(CORPUS_DIR),
        "gray": generate_gray_pdf(CORPUS_DIR),
        "cmyk": generate_cmyk_pdf(CORPUS_DIR),
        "background": generate_background_pdf(CORPUS_DIR),
        "large_image": generate_image_pdf(CORPUS_DIR, "large_image.pdf", 1001, 1000),
        "exact_image": generate_image_pdf(CORPUS_DIR, "exact_image.pdf", 1000, 1000),
        "form": generate_form_pdf(CORPUS_DIR),
        "encrypted": generate_encrypted_pdf(CORPUS_DIR),
        "malformed": generate_malformed_pdf(CORPUS_DIR),
        "no_pages": generate_no_pages_pdf(CORPUS_DIR),
        "second_page_color": generate_second_page_color_pdf(CORPUS_DIR),
        "text": generate_text_pdf(CORPUS_DIR),
    }


def add_page(
    pdf: pikepdf.Pdf,
    content: bytes,
    *,
    width: float = PAGE_WIDTH,
    height: float = PAGE_HEIGHT,
    resources: Dictionary | None = None,
) -> None:
    """Append a page with the given content stream bytes."""
    page = pikepdf.Page(
        Dictionary(
            Type=Name.Page,
            MediaBox=Array([0, 0, width, height]),
            Contents=pdf.make_stream(content),
            Resources=resources if resources is not None else Dictionary(),
        )
    )
    pdf.pages.append(page)


def make_image(pdf: pikepdf.Pdf, width: int, height: int) -> pikepdf.Stream:
    """Return an 8-bit grayscale image XObject of the given pixel size."""
    image = pikepdf.Stream(pdf, b"")
    image.write(zlib.compress(bytes(width * height)), filter=Name.FlateDecode)
    image.Type = Name.XObject
    image.Subtype = Name.Image
    image.Width = width
    image.Height = height
    image.ColorSpace = Name.DeviceGray
    image.BitsPerComponent = 8
    return image


def _save(pdf: pikepdf.Pdf, path: Path) -> Path:
    pdf.save(path)
    pdf.close()
    return path


def generate_plain_pdf(output_dir: Path) -> Path:
    """Three pages of black line art and a small gray box."""
    pdf = pikepdf.new()
    for _ in range(3):
        add_page(pdf, b"0 g 0 G 1 w 10 10 m 300 300 l S 0.5 g 20 20 100 80 re f")
    return _save(pdf, output_dir / "plain.pdf")


def generate_blank_pdf(output_dir: Path) -> Path:
    """Three pages with empty content streams."""
    pdf = pikepdf.new()
    for _ in range(3):
        add_page(pdf, b"")
    return _save(pdf, output_dir / "blank.pdf")


def generate_color_pdf(output_dir: Path) -> Path:
    """Pure red fill on a small rectangle."""
    pdf = pikepdf.new()
    add_page(pdf, b"1 0 0 rg 10 10 50 50 re f")
    return _save(pdf, output_dir / "color.pdf")


def generate_gray_pdf(output_dir: Path) -> Path:
    """Neutral grays set through every gray-capable operator."""
    pdf = pikepdf.new()
    add_page(
        pdf,
        b"0.5 0.5 0.5 rg 0.2 0.2 0.2 RG 0.7 g 0.1 G 0 0 0 1 k "
        b"/DeviceGray cs 0.3 sc 10 10 50 50 re f",
    )
    return _save(pdf, output_dir / "gray.pdf")


def generate_cmyk_pdf(output_dir: Path) -> Path:
    """Cyan stroke set with the CMYK operator."""
    pdf = pikepdf.new()
    add_page(pdf, b"1 0 0 0 K 10 10 m 200 200 l S")
    return _save(pdf, output_dir / "cmyk.pdf")


def generate_background_pdf(output_dir: Path) -> Path:
    """A light fill covering the whole page."""
    pdf = pikepdf.new()
    add_page(pdf, b"0.9 g 0 0 800 600 re f")
    return _save(pdf, output_dir / "background.pdf")


def generate_image_pdf(output_dir: Path, name: str, width: int, height: int) -> Path:
    """A single image XObject of *width* x *height* pixels."""
    pdf = pikepdf.new()
    image = make_image(pdf, width, height)
    add_page(
        pdf,
        b"q 400 0 0 300 0 0 cm /Im0 Do Q",
        resources=Dictionary(XObject=Dictionary(Im0=image)),
    )
    return _save(pdf, output_dir / name)


def generate_form_pdf(output_dir: Path) -> Path:
    """Blue fill and a large image, both nested inside a form XObject."""
    pdf = pikepdf.new()
    image = make_image(pdf, 2000, 1000)
    form = pdf.make_stream(b"0 0 1 rg 0 0 10 10 re f q 100 0 0 100 0 0 cm /Im0 Do Q")
    form.Type = Name.XObject
    form.Subtype = Name.Form
    form.BBox = Array([0, 0, 100, 100])
    form.Resources = Dictionary(XObject=Dictionary(Im0=image))
    add_page(
        pdf,
        b"/Fm0 Do",
        resources=Dictionary(XObject=Dictionary(Fm0=form)),
    )
    return _save(pdf, output_dir / "form.pdf")


def generate_encrypted_pdf(output_dir: Path) -> Path:
    """A PDF that needs a user password to open."""
    path = output_dir / "encrypted.pdf"
    pdf = pikepdf.new()
    add_page(pdf, b"1 0 0 rg 10 10 50 50 re f")
    pdf.save(path, encryption=pikepdf.Encryption(owner="owner-secret", user="user-secret"))
    pdf.close()
    return path


def generate_malformed_pdf(output_dir: Path) -> Path:
    """A valid PDF whose ``rg`` operator is missing a component."""
    pdf = pikepdf.new()
    add_page(pdf, b"1 0 rg 10 10 50 50 re f")
    return _save(pdf, output_dir / "malformed.pdf")


def generate_no_pages_pdf(output_dir: Path) -> Path:
    pdf = pikepdf.new()
    return _save(pdf, output_dir / "no_pages.pdf")


def generate_second_page_color_pdf(output_dir: Path) -> Path:
    """Monochrome first page, colored second page."""
    pdf = pikepdf.new()
    add_page(pdf, b"0 g 10 10 50 50 re f")
    add_page(pdf, b"0 1 0 rg 0 0 800 600 re f")
    return _save(pdf, output_dir / "second_page_color.pdf")


def generate_text_pdf(output_dir: Path) -> Path:
    """Letter-size page with blue headline text, drawn with reportlab."""
    path = output_dir / "text.pdf"

    from reportlab.lib.pagesizes import letter
    from reportlab.pdfgen import canvas

    c = canvas.Canvas(str(path), pagesize=letter)
    width, height = letter

    c.setFillColorRGB(0.1, 0.2, 0.8)
    c.setFont("Helvetica-Bold", 18)
    c.drawString(72, height - 72, "Quarterly Newsletter")

    c.setFillColorRGB(0, 0, 0)
    c.setFont("Helvetica", 12)
    c.drawString(72, height - 110, "Plain black body text.")

    c.save()
    return path
