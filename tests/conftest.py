"""Fixtures partagées — documents de test."""
import pytest

from page_content import (
    PageContent, ParagraphBlock, HeadingBlock, ImageBlock, ListBlock,
    Column, ColumnsBlock, TableBlock, SpacerBlock,
)


def nested_columns(depth: int) -> PageContent:
    """Document avec `depth` blocs Columns imbriqués, un paragraphe au fond."""
    inner = [ParagraphBlock(id="leaf", content="fond")]
    for level in range(depth):
        inner = [ColumnsBlock(id=f"cols-{level}", columns=[Column(width=100, blocks=inner)])]
    return PageContent(blocks=inner)


@pytest.fixture
def sample_doc() -> PageContent:
    """Titre, image, colonnes 50/50 (un paragraphe chacune), liste, tableau."""
    return PageContent(
        version="1.0",
        blocks=[
            HeadingBlock(id="h1", order=0, content="Nos partenaires", level=1),
            ImageBlock(id="img-1", order=1, url="a.png", alt="Logo"),
            ColumnsBlock(id="cols", order=2, columns=[
                Column(width=50, blocks=[ParagraphBlock(id="p-left", order=0, content="Gauche")]),
                Column(width=50, blocks=[ParagraphBlock(id="p-right", order=0, content="Droite")]),
            ]),
            ListBlock(id="list", order=3, items=["un", "deux"], listType="unordered"),
            TableBlock(id="table", order=4, rows=[["Nom", "Ville"], ["ACME", "Rennes"]], hasHeader=True),
            SpacerBlock(id="spacer", order=5, height=24),
        ],
    )
