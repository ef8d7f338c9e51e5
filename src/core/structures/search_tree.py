from collections import deque
from typing import Any, Callable, Iterable, List, Optional


class BSTNode:
    """
    Nó interno da Árvore Binária de Busca.
    Armazena apenas o valor e as referências para os filhos (sem ponteiro para o pai).
    """
    def __init__(self, value: Any):
        self.value = value
        self.left: Optional["BSTNode"] = None
        self.right: Optional["BSTNode"] = None

    def __lt__(self, other: "BSTNode") -> bool:
        return self.value < other.value

    def __eq__(self, other) -> bool:
        if not isinstance(other, BSTNode):
            return NotImplemented
        return self.value == other.value

    # Nó é mutável (value muda na remoção com dois filhos): não pode ser hashable
    __hash__ = None

    def __repr__(self):
        return f"BSTNode({self.value!r})"


class SearchTree:
    """
    Árvore Binária de Busca com valores únicos.
    Construída já balanceada a partir de uma coleção, mas inserções e remoções
    NÃO rebalanceiam: o formato só é recalculado por rebalance().

    Operações que descem a árvore inteira são iterativas, pois uma sequência
    de inserções crescentes degenera a árvore numa lista com n níveis.
    """
    def __init__(self, values: Iterable[Any] = ()):
        self.root: Optional[BSTNode] = self.build_tree(values)

    # --- Construção ---

    def build_tree(self, values: Iterable[Any]) -> Optional[BSTNode]:
        """
        Remove duplicatas, ordena e monta a árvore pelo elemento do meio.
        Altura resultante: floor(log2(n)).
        """
        return self._build_recursive(sorted(set(values)))

    def _build_recursive(self, values: List[Any]) -> Optional[BSTNode]:
        # Profundidade da recursão é log2(n): a metade cai a cada nível
        if not values:
            return None

        # Para tamanhos pares, o meio é o elemento logo após a metade esquerda
        mid = len(values) // 2
        node = BSTNode(values[mid])
        node.left = self._build_recursive(values[:mid])
        node.right = self._build_recursive(values[mid + 1:])
        return node

    # --- Mutação ---

    def insert(self, value: Any):
        """
        Insere um valor como nova folha. Valores repetidos são ignorados
        silenciosamente (a unicidade faz parte do contrato, não é um erro).
        Em árvore vazia, o valor vira a raiz.
        """
        if self.root is None:
            self.root = BSTNode(value)
            return

        current = self.root
        while value != current.value:
            if value < current.value:
                if current.left is None:
                    current.left = BSTNode(value)
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = BSTNode(value)
                    return
                current = current.right

    def delete(self, value: Any):
        """Remove o valor (se existir). Valor ausente não altera a árvore."""
        parent = None
        current = self.root
        while current is not None and value != current.value:
            parent = current
            current = current.left if value < current.value else current.right

        if current is None:
            return

        self._relink(parent, current, self._remove(current))

    def _remove(self, node: BSTNode) -> Optional[BSTNode]:
        """
        Política de remoção do nó encontrado. Retorna o que ocupa o lugar dele:
        - sem filho esquerdo: sobe o direito (pode ser None);
        - sem filho direito: sobe o esquerdo;
        - dois filhos: copia o sucessor in-order e remove o sucessor da subárvore direita.
        """
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left

        parent, successor = node, node.right
        while successor.left is not None:
            parent, successor = successor, successor.left

        node.value = successor.value
        # Sucessor nunca tem filho esquerdo
        self._relink(parent, successor, successor.right)
        return node

    def _relink(self, parent: Optional[BSTNode], child: BSTNode, replacement: Optional[BSTNode]):
        """Troca child por replacement no pai (comparação por identidade)."""
        if parent is None:
            self.root = replacement
        elif parent.left is child:
            parent.left = replacement
        else:
            parent.right = replacement

    def rebalance(self):
        """Descarta o formato atual e reconstrói a árvore com os mesmos valores."""
        # level_order não vem ordenado: build_tree ordena internamente
        self.root = self.build_tree(self.level_order())

    # --- Busca ---

    def find(self, value: Any) -> Optional[BSTNode]:
        """Busca em O(h). Retorna o nó ou None."""
        current = self.root
        while current:
            if value == current.value:
                return current
            elif value < current.value:
                current = current.left
            else:
                current = current.right
        return None

    # --- Travessias ---

    def in_order(self, visit: Optional[Callable[[BSTNode], Any]] = None) -> List[Any]:
        """Esquerda, atual, direita. Retorna os valores em ordem crescente."""
        values: List[Any] = []
        stack: List[BSTNode] = []
        node = self.root
        while stack or node:
            while node:
                stack.append(node)
                node = node.left
            node = stack.pop()
            self._visit(node, values, visit)
            node = node.right
        return values

    def pre_order(self, visit: Optional[Callable[[BSTNode], Any]] = None) -> List[Any]:
        """Atual, esquerda, direita."""
        values: List[Any] = []
        stack = [self.root] if self.root else []
        while stack:
            node = stack.pop()
            self._visit(node, values, visit)
            # Direita empilhada primeiro para a esquerda sair antes
            if node.right:
                stack.append(node.right)
            if node.left:
                stack.append(node.left)
        return values

    def post_order(self, visit: Optional[Callable[[BSTNode], Any]] = None) -> List[Any]:
        """Esquerda, direita, atual."""
        values: List[Any] = []
        for node in self._post_order_nodes(self.root):
            self._visit(node, values, visit)
        return values

    def _post_order_nodes(self, node: Optional[BSTNode]) -> List[BSTNode]:
        # Atual, direita, esquerda invertido = esquerda, direita, atual
        nodes: List[BSTNode] = []
        stack = [node] if node else []
        while stack:
            current = stack.pop()
            nodes.append(current)
            if current.left:
                stack.append(current.left)
            if current.right:
                stack.append(current.right)
        nodes.reverse()
        return nodes

    def level_order(self, visit: Optional[Callable[[BSTNode], Any]] = None) -> List[Any]:
        """Busca em largura (fila FIFO), da esquerda para a direita em cada nível."""
        values: List[Any] = []
        if self.root is None:
            return values

        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            self._visit(node, values, visit)
            if node.left:
                queue.append(node.left)
            if node.right:
                queue.append(node.right)
        return values

    @staticmethod
    def _visit(node, values, visit):
        values.append(node.value)
        if visit is not None:
            visit(node)

    # --- Consultas estruturais ---

    _ROOT = object()

    def height(self, node: Any = _ROOT) -> int:
        """Altura em arestas: -1 para None, 0 para folha. Sem argumento, usa a raiz."""
        if node is SearchTree._ROOT:
            node = self.root
        return self._subtree_heights(node)[0]

    def depth(self, node: Optional[BSTNode]) -> Optional[int]:
        """
        Número de arestas entre a raiz e o nó.
        A descida compara VALORES (não identidade): um nó externo com valor
        presente na árvore tem a mesma profundidade do nó interno equivalente.
        Retorna None se o valor não estiver na árvore.
        """
        if node is None:
            return None

        current = self.root
        edges = 0
        while current:
            if node.value == current.value:
                return edges
            current = current.left if node.value < current.value else current.right
            edges += 1
        return None

    def is_balanced(self, node: Any = _ROOT) -> bool:
        """
        Verdadeiro se, em todo nó, as alturas das subárvores diferem no máximo em 1.
        Calcula altura e balanceamento numa única passada de baixo para cima: O(n).
        """
        if node is SearchTree._ROOT:
            node = self.root
        return self._subtree_heights(node)[1]

    def _subtree_heights(self, node: Optional[BSTNode]):
        """Retorna (altura, balanceada?) percorrendo os nós em pós-ordem."""
        if node is None:
            return -1, True

        # Nós não são hashable: alturas indexadas por id()
        heights = {}
        balanced = True
        for current in self._post_order_nodes(node):
            left = heights[id(current.left)] if current.left else -1
            right = heights[id(current.right)] if current.right else -1
            if abs(left - right) > 1:
                balanced = False
            heights[id(current)] = 1 + max(left, right)
        return heights[id(node)], balanced

    # --- Protocolo Python ---

    def __len__(self):
        return len(self.level_order())

    def __contains__(self, value):
        return self.find(value) is not None

    def __iter__(self):
        return iter(self.in_order())

    def __repr__(self):
        return f"SearchTree(size={len(self)}, height={self.height()}, root={self.root!r})"
