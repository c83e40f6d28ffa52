"""
pdfcli - sample document generator

Writes a one-page PDF that the commands can be tried against, then prints
what the structural reader sees in it.

    python examples/generate_sample.py [sample.pdf]
"""

import sys

from pypdf import PdfWriter

from pdfcli import info


def write_sample(path: str) -> None:
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    writer.add_metadata({
        "/Title": "pdfcli sample",
        "/Author": "pdfcli",
    })
    with open(path, "wb") as handle:
        writer.write(handle)


def main() -> None:
    path = sys.argv[1] if len(sys.argv) > 1 else "sample.pdf"
    write_sample(path)
    print(f"wrote {path}", file=sys.stderr)

    pdf_info = info(path)
    print(f"Pages: {pdf_info.pages}")
    for key, value in pdf_info.metadata.items():
        print(f"{key}: {value}")


if __name__ == "__main__":
    main()
