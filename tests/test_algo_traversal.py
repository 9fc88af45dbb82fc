import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.models.node import TreeNode
from src.core.structures.bst import BinarySearchTree
from src.core.structures.avl_tree import AVLTree
from src.core.algorithms.traversal import (
    pre_order, in_order, post_order, visit_order, count_nodes, is_bst, is_avl
)

def _sample_tree():
    tree = BinarySearchTree()
    for key in [5, 3, 7, 2, 4, 8]:
        tree.insert(key)
    return tree

def test_traversal_orders():
    print("--- Iniciando Teste das Travessias ---")
    root = _sample_tree().get_root()

    assert [n.key for n in pre_order(root)] == [5, 3, 2, 4, 7, 8]
    assert [n.key for n in in_order(root)] == [2, 3, 4, 5, 7, 8]
    assert [n.key for n in post_order(root)] == [2, 4, 3, 8, 7, 5]
    print(">> SUCESSO: Pré, in e pós-ordem corretas.")

def test_traversal_of_empty_tree():
    assert pre_order(None) == []
    assert in_order(None) == []
    assert post_order(None) == []
    assert count_nodes(None) == 0
    assert is_bst(None) and is_avl(None)

def test_visit_order_labels():
    tree = _sample_tree()
    labels = visit_order(post_order(tree.get_root()))
    assert labels == {2: 1, 4: 2, 3: 3, 8: 4, 7: 5, 5: 6}

    # Mesmo rótulo usado para o caminho de busca
    path_labels = visit_order(tree.find_with_path(4))
    assert path_labels == {5: 1, 3: 2, 4: 3}

def test_count_nodes():
    assert count_nodes(_sample_tree().get_root()) == 6

def test_is_bst_detects_violation():
    root = TreeNode(10)
    root.left = TreeNode(5)
    root.right = TreeNode(15)
    assert is_bst(root)

    # 12 está na subárvore esquerda de 10: viola a ordenação
    root.left.right = TreeNode(12)
    assert not is_bst(root)

    # Duplicatas também violam
    dup = TreeNode(10)
    dup.right = TreeNode(10)
    assert not is_bst(dup)

def test_is_avl_detects_violation():
    avl = AVLTree()
    for key in range(10):
        avl.insert(key)
    assert is_avl(avl.get_root())

    # BST degenerada: alturas armazenadas nunca são atualizadas
    bst = BinarySearchTree()
    for key in [1, 2, 3]:
        bst.insert(key)
    assert not is_avl(bst.get_root())

    # Altura armazenada inconsistente
    avl.get_root().height += 1
    assert not is_avl(avl.get_root())

if __name__ == "__main__":
    test_traversal_orders()
    test_visit_order_labels()
