"""
Exemple simple : document partenaires avec une image éditée (alignement + largeur).
Écrit le JSON résultant à côté du script.
"""
from pathlib import Path

from page_content import (
    PageContent, HeadingBlock, ParagraphBlock, ImageBlock, Column, ColumnsBlock,
    BlockEditorSurface, dumps, validate,
)


def main():
    doc = PageContent(blocks=[
        HeadingBlock(id="title", order=0, content="Nos partenaires", level=1),
        ColumnsBlock(id="cols", order=1, columns=[
            Column(width=50, blocks=[ImageBlock(id="logo", order=0, url="/dist/uploads/logo.png", alt="Logo")]),
            Column(width=50, blocks=[ParagraphBlock(id="desc", order=0, content="Partenaire depuis 2019.")]),
        ]),
    ])

    # Montage : alignement "center" posé une seule fois
    surface = BlockEditorSurface(doc, "logo")

    # Glisser du curseur : valeurs locales, un seul commit au relâchement
    surface.pointer_enter()
    surface.open_size_control()
    for value in (80, 65, 50):
        surface.set_width_live(value)
    surface.commit_width()
    surface.set_alignment("left")

    validate(doc)

    output_path = Path(__file__).parent / "partners_page.json"
    output_path.write_text(dumps(doc, indent=2), encoding="utf-8")

    print(f"✅ Document généré : {output_path} ({surface.commits} commits)")


if __name__ == "__main__":
    main()
