# src/driver.py
import sys
import os
import random
from typing import Any, Dict, List, Optional

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.structures.search_tree import SearchTree
from src.core.structures.tree_printer import render_tree


class TreeDriver:
    """
    Roteiro de demonstração da árvore:
    monta a partir de números aleatórios, desbalanceia com inserções
    sequenciais e rebalanceia, registrando cada etapa no log.
    """
    SAMPLE_SIZE = 15
    MAX_VALUE = 100
    UNBALANCE_COUNT = 5
    MAX_LOGS = 50

    def __init__(self, seed: Optional[int] = None, sample_size: int = SAMPLE_SIZE):
        if sample_size <= 0:
            raise ValueError("O tamanho da amostra deve ser maior que zero.")

        self.sample_size = sample_size
        self.rng = random.Random(seed)
        self.tree: Optional[SearchTree] = None
        self.logs: List[str] = []

    def run(self) -> Dict[str, Any]:
        self.log("--- Montando árvore a partir de valores aleatórios ---")
        values = [self.rng.randrange(self.MAX_VALUE) for _ in range(self.sample_size)]
        self.tree = SearchTree(values)
        self.log(f"Entrada: {values}")

        balanced_initial = self.tree.is_balanced()
        self.log(f"Balanceada? {balanced_initial}")
        self.log_traversals()

        # Valores acima de MAX_VALUE em sequência viram uma "escada" à direita
        self.log(f"--- Inserindo {self.UNBALANCE_COUNT} valores sequenciais > {self.MAX_VALUE} ---")
        for offset in range(1, self.UNBALANCE_COUNT + 1):
            self.tree.insert(self.MAX_VALUE + offset)

        balanced_after_insert = self.tree.is_balanced()
        height_before = self.tree.height()
        self.log(f"Balanceada? {balanced_after_insert} (altura {height_before})")
        self.log(render_tree(self.tree.root))

        self.log("--- Rebalanceando ---")
        self.tree.rebalance()

        balanced_after_rebalance = self.tree.is_balanced()
        height_after = self.tree.height()
        self.log(f"Balanceada? {balanced_after_rebalance} (altura {height_after})")
        self.log_traversals()
        self.log(render_tree(self.tree.root))

        return {
            'balanced_initial': balanced_initial,
            'balanced_after_insert': balanced_after_insert,
            'balanced_after_rebalance': balanced_after_rebalance,
            'height_before_rebalance': height_before,
            'height_after_rebalance': height_after,
        }

    def log_traversals(self):
        self.log(f"Level-order: {self.tree.level_order()}")
        self.log(f"Pre-order:   {self.tree.pre_order()}")
        self.log(f"Post-order:  {self.tree.post_order()}")
        self.log(f"In-order:    {self.tree.in_order()}")

    def log(self, msg: str):
        print(msg)
        self.logs.append(msg)
        # Mantém apenas as últimas MAX_LOGS mensagens em memória
        if len(self.logs) > self.MAX_LOGS:
            self.logs.pop(0)


def main():
    TreeDriver().run()


if __name__ == "__main__":
    main()
