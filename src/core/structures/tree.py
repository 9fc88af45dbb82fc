from abc import ABC, abstractmethod
from typing import List, Optional
from src.core.models.node import TreeNode
from src.core.exceptions import CapacityExceededError

class OrderedTree(ABC):
    """
    Contrato comum das árvores de busca com chaves inteiras únicas.
    Implementa a verificação de duplicatas e de capacidade, as buscas e a
    representação textual. Cada variante define apenas a inserção estrutural
    (_insert_node) e a remoção (delete).
    """
    MAX_SIZE = 40

    def __init__(self):
        self.root: Optional[TreeNode] = None
        self.size = 0

    def insert(self, key: int) -> bool:
        """
        Insere a chave se ela ainda não existir.
        Lança CapacityExceededError se a árvore já tiver MAX_SIZE nós.
        Retorna False (sem alterar nada) se a chave for duplicada.
        """
        if self.size >= self.MAX_SIZE:
            raise CapacityExceededError(self.MAX_SIZE)

        if self.root is None:
            self.root = TreeNode(key)
            self.size += 1
            return True

        # Rejeita duplicatas com uma travessia completa antes de inserir
        if self.contains(key):
            return False

        self.size += 1
        self._insert_node(self.root, key)
        return True

    @abstractmethod
    def _insert_node(self, current: TreeNode, key: int):
        """
        Posiciona a chave a partir de 'current' segundo a política da variante.
        Não verifica duplicatas nem altera 'size'.
        """

    @abstractmethod
    def delete(self, key: int) -> bool:
        """Remove a chave se existir. Retorna False caso contrário."""

    def find(self, key: int) -> Optional[TreeNode]:
        """Busca em O(h). Retorna o nó com a chave ou None."""
        current = self.root
        while current:
            if key == current.key:
                return current
            elif key < current.key:
                current = current.left
            else:
                current = current.right
        return None

    def contains(self, key: int) -> bool:
        return self.find(key) is not None

    def __contains__(self, key: int) -> bool:
        return self.contains(key)

    def find_with_path(self, key: int, verbose: bool = False) -> List[TreeNode]:
        """
        Retorna os nós visitados durante a busca, do primeiro ao último.
        O último elemento é o nó encontrado ou o último nó antes de sair da árvore.
        Args:
            verbose: Se True, imprime cada passo da descida.
        """
        path: List[TreeNode] = []
        current = self.root

        if verbose:
            print(f"[BUSCA] Procurando chave {key} (tamanho da árvore: {self.size})")

        while current:
            path.append(current)
            if key > current.key:
                if verbose: print(f"  > Nó {current.key}: {key} é maior, descendo à direita")
                current = current.right
            elif key < current.key:
                if verbose: print(f"  > Nó {current.key}: {key} é menor, descendo à esquerda")
                current = current.left
            else:
                if verbose: print(f"[BUSCA] Chave {key} encontrada após {len(path)} nós.")
                return path

        if verbose: print(f"[BUSCA] Chave {key} não encontrada ({len(path)} nós visitados).")
        return path

    def clear(self):
        """Descarta todos os nós de uma vez."""
        self.root = None
        self.size = 0

    def get_root(self) -> Optional[TreeNode]:
        return self.root

    def get_size(self) -> int:
        return self.size

    def __len__(self):
        return self.size

    def in_order_successor(self, node: TreeNode) -> TreeNode:
        """
        Menor chave da subárvore direita: desce uma vez à direita e depois
        à esquerda até o fim. Pré-condição: node.right não é None.
        """
        current = node.right
        while current.left is not None:
            current = current.left
        return current

    def height(self) -> int:
        """Altura calculada pela estrutura (-1 para árvore vazia)."""
        return self._height_recursive(self.root)

    def _height_recursive(self, node: Optional[TreeNode]) -> int:
        if node is None:
            return -1
        return 1 + max(self._height_recursive(node.left), self._height_recursive(node.right))

    def keys(self) -> List[int]:
        """Chaves em ordem crescente (in-order)."""
        values: List[int] = []
        self._in_order(self.root, values)
        return values

    def _in_order(self, node: Optional[TreeNode], values: List[int]):
        if node:
            self._in_order(node.left, values)
            values.append(node.key)
            self._in_order(node.right, values)

    def __str__(self):
        return self._to_string_recursive(self.root)

    def _to_string_recursive(self, node: Optional[TreeNode]) -> str:
        if node is None:
            return "null"
        left = self._to_string_recursive(node.left)
        right = self._to_string_recursive(node.right)
        return f"{node.key}[{left}, {right}]"

    def __repr__(self):
        return f"{type(self).__name__}(size={self.size}/{self.MAX_SIZE}, tree={self})"
