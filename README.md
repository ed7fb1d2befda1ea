# dsprimer

A small collection of classic data structures and algorithms written in plain
Python, meant for learning how they work. It uses only the standard library.

## What is inside

| Module                 | Contents |
|------------------------|----------|
| `dsprimer.arrays`      | `FixedArray` (fixed capacity, insert/delete by index), `linear_search`, `binary_search` |
| `dsprimer.sorting`     | `bubble_sort`, `count_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort` |
| `dsprimer.linked_list` | `Node`, `LinkedList`, `CircularLinkedList` |
| `dsprimer.queues`      | `ArrayQueue`, `CircularQueue`, `LinkedQueue`, `QueueFullError`, `QueueEmptyError` |
| `dsprimer.stacks`      | `ArrayStack`, `LinkedStack`, `StackOverflowError`, `StackUnderflowError`, `precedence`, `infix_to_postfix`, `parentheses_balanced`, `brackets_balanced` |
| `dsprimer.trees`       | `TreeNode`, `preorder`, `inorder`, `postorder`, `is_bst`, `search`, `search_iterative` |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Searching and sorting

`linear_search` and `binary_search` return the index of the element, or
`None` when it is absent. `binary_search` expects its input in ascending order.

Every sort takes any iterable and returns a new sorted list, leaving its input
untouched. `count_sort` handles non-negative integers only and raises
`ValueError` for a negative value.

```python
from dsprimer.arrays import binary_search, linear_search
from dsprimer.sorting import merge_sort, quick_sort

linear_search([1, 2, 3, 4, 5], 3)   # 2
binary_search([1, 2, 3, 4, 5], 5)   # 4
merge_sort([5, 1, 4, 2, 8, 3, 6, 7])  # [1, 2, 3, 4, 5, 6, 7, 8]
quick_sort([8, 4, 7, 3, 10, 9])       # [3, 4, 7, 8, 9, 10]
```

## A fixed-capacity array

`FixedArray(capacity, used)` starts with `used` slots set to zero.
`set_values` must fill exactly the used slots. `insert` raises
`OverflowError` when the array is full and `IndexError` for a bad index;
`delete` returns the removed element.

```python
from dsprimer.arrays import FixedArray

arr = FixedArray(10, 5)
arr.set_values([3, 5, 7, 8, 9])
arr.insert(3, 11)
arr.delete(1)   # 5
list(arr)       # [3, 7, 11, 8, 9]
```

## Linked lists

`LinkedList` supports inserting at the front, at an index, at the end and
after a given node, deleting the first, last or indexed node, deleting by
value (returns whether a node was removed) and `find`, which returns the node
holding a value. `CircularLinkedList` keeps its last node linked back to the
head.

```python
from dsprimer.linked_list import CircularLinkedList, LinkedList

items = LinkedList([20, 30, 40, 50])
items.delete_value(30)    # True
list(items)               # [20, 40, 50]

ring = CircularLinkedList([20, 30, 40, 50])
ring.insert_first(10)
list(ring)                # [10, 20, 30, 40, 50]
```

## Queues

`ArrayQueue` is a linear array queue: slots freed by `dequeue` are not reused.
`CircularQueue(size)` holds at most `size - 1` items. `LinkedQueue` is
unbounded. A full queue raises `QueueFullError`; an empty one raises
`QueueEmptyError`.

```python
from dsprimer.queues import CircularQueue, LinkedQueue

q = CircularQueue(5)
for value in (10, 20, 30, 40):
    q.enqueue(value)
q.is_full()       # True
q.dequeue()       # 10

lq = LinkedQueue()
lq.enqueue(10)
lq.dequeue()      # 10
```

## Stacks and expressions

`ArrayStack(size)` raises `StackOverflowError` when full; both stacks raise
`StackUnderflowError` when popped or read while empty. `peek(position)` counts
from 1 at the top and raises `IndexError` outside the stack. Iterating a stack
yields values from the top down. `LinkedStack` also offers `bottom()`.

`infix_to_postfix` converts an expression made of single characters and the
operators `+ - * /` (no parentheses) to postfix. `parentheses_balanced`
checks round parentheses only; `brackets_balanced` checks `()`, `{}` and `[]`.

```python
from dsprimer.stacks import ArrayStack, brackets_balanced, infix_to_postfix

s = ArrayStack(50)
s.push(10)
s.push(20)
s.top()                                # 20
s.peek(2)                              # 10
infix_to_postfix("a+b*c-d")            # "abc*+d-"
brackets_balanced("{[(a+b)*(c-d)]}")   # True
```

## Binary trees

The traversals are generators. `is_bst` checks that the in-order values are
strictly increasing. `search` and `search_iterative` return the node holding
the key, or `None`.

```python
from dsprimer.trees import TreeNode, inorder, is_bst, search

root = TreeNode(5, TreeNode(3, TreeNode(1), TreeNode(4)), TreeNode(6))
list(inorder(root))   # [1, 3, 4, 5, 6]
is_bst(root)          # True
search(root, 6).data  # 6
```

## What it does not do

The package is a library only: it has no command-line program and prints
nothing. The sorts do not report their passes or comparisons; they simply
return the sorted list.