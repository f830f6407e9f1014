# dslabs

Small, self-contained exercises on classic data structures and simple image
processing.

## What is in it

- **Images**
  - `dslabs.png`: an RGBA `Image` made of `Pixel`s. A pixel has 8-bit `r`,
    `g` and `b` and an alpha `a` in [0, 1]. `load_png` reads a file and
    `Image.save` writes one. `Image.get_pixel` clamps coordinates that fall
    past the right or bottom edge and issues a `RuntimeWarning` when it does.
    `Image.resize` crops or pads in place, and `Image.copy` makes an
    independent copy.
  - `dslabs.lab_intro`: `grayscale`, `create_spotlight`, `ubcify` and
    `watermark`. Each returns a new image and leaves its inputs unchanged.
    `colordist` measures the distance between two pixels.
  - `dslabs.rgb_hsl`: the `Rgba` and `Hsla` colour types and the
    conversions `rgb_to_hsl` and `hsl_to_rgb`.
- **Recursion** (`dslabs.exercises`): `sum_digits` and `triangle`. Both
  raise `ValueError` for negative input.
- **Stacks and queues** (`dslabs.quackfun`): `stack_sum`, `scramble` and
  `verify_same`.
  - A stack is a list whose last item is the top.
  - A queue is a list or a `collections.deque` whose first item is the front.
  - `scramble` reverses every even-sized block of the queue in place. The
    blocks have sizes 1, 2, 3, and so on.
- **Linked lists** (`dslabs.linked_list`):
  - `LinkedList` provides `insert` (at the head), `delete_last`, `remove`
    (the first match) and `insert_after` (after every match). It also has
    `to_list`, `len()`, iteration and `str()`.
  - `interleave` builds a new list that alternates the keys of two lists.
- **Deques** (`dslabs.deque`): a doubly linked `Deque`. It has
  `push_left`, `push_right`, `pop_left`, `pop_right` (these raise
  `IndexError` when the deque is empty), `is_empty` and `remove_duplicates`,
  which collapses runs of equal consecutive items.
- **Binary trees**
  - `dslabs.binarytree`: a `BinaryTree` of `Node`s. It supports random or
    BST-order `insert`, `clear`, `copy`, `height`, `in_order`, `mirror`,
    `paths`, `sum_distances`, `is_ordered`, `render`, `print`,
    `print_left_to_right` and `print_paths`.
  - `dslabs.printtree`: draws trees as ASCII art with `render_tree` and
    `print_tree`.
  - `dslabs.lcg`: random insertion uses a small, reproducible linear
    congruential generator. The shared generator is driven by `urand`,
    `urandn` and `usrand`, and `Random` instances are independent.
  - `dslabs.coloredout`:
    - `output_bold` and `bold_digits` add ANSI bold escapes.
    - `compare_output` colours one text according to how it matches an
      expected text.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Library use

```python
from dslabs.linked_list import LinkedList, interleave

lst = LinkedList()
for key in (3, 2, 1):
    lst.insert(key)              # inserts at the head
print(lst)                       # [1, 2, 3]
lst.insert_after(2, 5)
print(lst.to_list())             # [1, 2, 5, 3]
print(interleave(lst, LinkedList([9, 8])).to_list())  # [1, 9, 2, 8, 5, 3]
```

```python
from dslabs.binarytree import BinaryTree

tree = BinaryTree()
for value in (5, 3, 8, 1, 4):
    tree.insert(value, True)     # BST-style insertion
print(tree.height(), tree.sum_distances(), tree.is_ordered())  # 2 6 True
tree.mirror()
print(tree.render())
```

```python
from dslabs.png import load_png
from dslabs.lab_intro import grayscale

image = load_png("photo.png")
grayscale(image).save("photo-gray.png")
```

## Commands

```
dslabs-intro [--input FILE] [--overlay FILE] [--output-dir DIR]
```

This reads the input image and the overlay image. By default these are
`rosegarden.png` and `overlay.png` in the current directory. It writes
`out-grayscale.png`, `out-spotlight.png` (centred at 300, 300),
`out-ubcify.png` and `out-watermark.png` into the output directory, which
defaults to `.`. If a file cannot be read or written, it prints the error and
exits with status 1.

```
dslabs-trees [c]
```

This builds a few sample trees: a random tree, its mirror, a BST, its mirror
and an almost-ordered tree. For each one it prints:

- the height;
- whether the tree is ordered;
- the sum of node depths;
- a drawing of the tree;
- the in-order values;
- the root-to-leaf paths.

On a terminal, a first argument starting with `c` colours the output against
the file `soln_treefun.out` in the current directory. If that file is
missing, the output is compared against empty text.

```
dslabs-deque
```

This pushes the words `ba ba ab ab ab ab ba ba` onto the left of a deque and
removes consecutive duplicates. It then pops and prints the remaining words
from the right, which gives `ba`, `ab` and `ba`.

## Limits

- Images are stored only as RGBA. The HSL conversions are standalone
  functions and are not used by `Image`.
- `Image.save` always writes PNG, and it refuses to save an image that has
  no pixels.
- `dslabs-trees` does not ship the expected-output file that colouring
  compares against.

## Tests

```
pytest
```