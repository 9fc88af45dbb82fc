from typing import Optional
from src.core.models.node import TreeNode
from src.core.structures.tree import OrderedTree

class BinarySearchTree(OrderedTree):
    """
    Árvore binária de busca simples, sem balanceamento.
    A forma da árvore depende só da ordem das inserções.
    """

    def _insert_node(self, current: TreeNode, key: int):
        # Duplicatas já foram rejeitadas por insert()
        if key > current.key:
            if current.right is None:
                current.right = TreeNode(key)
            else:
                self._insert_node(current.right, key)
        else:
            if current.left is None:
                current.left = TreeNode(key)
            else:
                self._insert_node(current.left, key)

    def delete(self, key: int) -> bool:
        """
        Remove a chave se existir.
        Nó com dois filhos recebe a chave do sucessor in-order, que é então
        removido da subárvore direita.
        """
        if not self.contains(key):
            return False
        self.root = self._delete_recursive(self.root, key)
        self.size -= 1
        return True

    def _delete_recursive(self, current: Optional[TreeNode], key: int) -> Optional[TreeNode]:
        if current is None:
            return None

        if key < current.key:
            current.left = self._delete_recursive(current.left, key)
        elif key > current.key:
            current.right = self._delete_recursive(current.right, key)
        else:
            # Sem filhos ou um filho: o filho (ou None) ocupa o lugar
            if current.left is None:
                return current.right
            if current.right is None:
                return current.left

            # Dois filhos: copia a chave do sucessor e remove o original
            successor = self.in_order_successor(current)
            current.key = successor.key
            current.right = self._delete_recursive(current.right, successor.key)

        return current
