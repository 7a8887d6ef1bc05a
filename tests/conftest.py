import pytest


TRAIT_OBO = """format-version: 1.2
ontology: co_371

[Term]
id: ns4:Trait
name: Trait

[Term]
id: ns4:CO_371:0000001
name: Plant height
is_a: ns4:Trait ! Trait

[Term]
id: ns4:CO_371:0000002
name: Leaf area
is_a: ns4:Trait

[Term]
id: ns4:CO_371:0000003
name: Area ratio
is_a: ns4:CO_371:0000002 ! Leaf area
"""


def obo_document(*blocks: str, header: str = "format-version: 1.2\n") -> str:
    return header + "".join(f"\n[Term]\n{block.strip()}\n" for block in blocks)


@pytest.fixture
def trait_obo() -> str:
    return TRAIT_OBO
