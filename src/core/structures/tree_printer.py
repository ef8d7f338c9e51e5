from typing import List, Optional

from src.core.structures.search_tree import BSTNode, SearchTree


def render_tree(node: Optional[BSTNode], prefix: str = "", is_left: bool = True) -> str:
    """
    Desenha a árvore "deitada": subárvore direita em cima, esquerda embaixo.
    Só lê value/left/right, não altera nada.
    """
    lines: List[str] = []
    stack = [(node, prefix, is_left, False)] if node else []

    while stack:
        current, prefix, is_left, ready = stack.pop()
        if ready:
            lines.append(prefix + ("└── " if is_left else "┌── ") + str(current.value))
            continue

        # Empilhados ao contrário: direita, o próprio nó, esquerda
        if current.left:
            stack.append((current.left, prefix + ("    " if is_left else "│   "), True, False))
        stack.append((current, prefix, is_left, True))
        if current.right:
            stack.append((current.right, prefix + ("│   " if is_left else "    "), False, False))

    return "\n".join(lines)


def print_tree(tree: SearchTree):
    print(render_tree(tree.root))
