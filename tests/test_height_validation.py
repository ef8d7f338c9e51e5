"""
Validação empírica da altura da árvore.
- Construção: altura = floor(log2(n))
- Inserções sequenciais: altura degenera para n - 1
- Rebalanceamento: altura volta a floor(log2(n)) e a árvore fica balanceada
"""
import sys
import os
import random
import numpy as np

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.structures.search_tree import SearchTree

SIZES = [1, 3, 7, 15, 31, 63, 127, 255]


def test_build_height_is_logarithmic():
    """Para n = 2^k - 1 a árvore é perfeita: altura = log2(n + 1) - 1."""
    print("--- Teste: Altura após construção ---")

    for n in SIZES:
        tree = SearchTree(range(n))
        expected = int(np.floor(np.log2(n)))
        print(f"  n={n:4d}: altura {tree.height()} (esperado {expected})")
        assert tree.height() == expected
        assert tree.is_balanced()

    # Tamanhos arbitrários também respeitam floor(log2(n))
    for n in [2, 10, 100, 1000]:
        assert SearchTree(range(n)).height() == int(np.floor(np.log2(n)))


def test_sequential_inserts_degenerate():
    print("\n--- Teste: Degeneração por inserção sequencial ---")

    tree = SearchTree([0])
    for k in range(1, 50):
        tree.insert(k)

    print(f"  Altura após 49 inserções crescentes: {tree.height()}")
    assert tree.height() == 49, "Sem rebalanceamento a árvore vira uma lista"
    assert not tree.is_balanced()


def test_rebalance_restores_height():
    print("\n--- Teste: Rebalanceamento ---")

    rng = random.Random(7)
    heights = []

    for n in [20, 60, 200]:
        tree = SearchTree(rng.sample(range(10 * n), n // 2))
        # Inserções crescentes acima do maior valor desbalanceiam a direita
        for k in range(10 * n, 10 * n + n // 2):
            tree.insert(k)
        before = tree.in_order()

        tree.rebalance()

        assert tree.in_order() == before, "Rebalance não pode perder nem criar valores"
        assert tree.is_balanced()
        assert tree.height() == int(np.floor(np.log2(len(before))))
        heights.append(tree.height())

    print(f"  Alturas após rebalance: {heights} | média {np.mean(heights):.2f}")


def test_is_balanced_matches_naive_definition():
    """O cálculo em uma passada deve concordar com a definição recursiva direta."""

    def naive(tree, node):
        if node is None:
            return True
        return (naive(tree, node.left) and naive(tree, node.right)
                and abs(tree.height(node.left) - tree.height(node.right)) <= 1)

    rng = random.Random(99)
    for _ in range(30):
        tree = SearchTree(rng.sample(range(100), 8))
        for value in rng.sample(range(100), 6):
            tree.insert(value)
        for value in rng.sample(range(100), 4):
            tree.delete(value)
        assert tree.is_balanced() == naive(tree, tree.root)


if __name__ == "__main__":
    test_build_height_is_logarithmic()
    test_sequential_inserts_degenerate()
    test_rebalance_restores_height()
    test_is_balanced_matches_naive_definition()
