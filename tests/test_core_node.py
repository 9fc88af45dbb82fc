import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.models.node import TreeNode

def test_node_properties():
    print("--- Iniciando Teste do TreeNode ---")

    node = TreeNode(1)
    assert node.key == 1
    assert node.left is None and node.right is None
    assert node.height == 0, "Folha deve ter altura 0"
    assert node.is_leaf
    assert node.children_count == 0

    print(">> SUCESSO: Nó criado sem filhos e com altura de folha.")

def test_node_children():
    node1 = TreeNode(1)
    node2 = TreeNode(2)

    node1.left = node2
    assert node1.right is None
    assert node1.left is node2
    assert node1.left.key == 2
    assert node1.left.is_leaf
    assert not node1.is_leaf
    assert node1.children_count == 1

    node1.right = TreeNode(3)
    assert node1.children_count == 2
    print(f"Nó com filhos: {node1} -> {node1.left}, {node1.right}")

if __name__ == "__main__":
    test_node_properties()
    test_node_children()
