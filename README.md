# bankqueue

A small bank ticket queue. Customers take a numbered ticket and tellers serve
them in order. The package has four modules:

- `bankqueue.linkedlist`: `Node` and `LinkedList`, a singly linked list.
- `bankqueue.ticketqueue`: `TicketQueue`, a first-in first-out queue with a
  fixed capacity (50 by default), and the errors `QueueFullError` and
  `QueueEmptyError`.
- `bankqueue.stack`: `Stack`, a last-in first-out stack, and `to_binary`.
- `bankqueue.cli`: the interactive menu (`menu_text`, `run`, `main`).

## Installing

```
pip install .
```

## The interactive menu

```
bankqueue
```

The program prints a menu and reads choices from standard input. Choices are
whole numbers separated by spaces or newlines:

1. Take a ticket: the next number joins the back of the queue.
2. Serve a ticket: the ticket at the front is removed.
3. Show the queue.
4. Quit.

Any other input, including text that is not a number, is reported as an
invalid choice and the menu is shown again. The program also stops when the
input runs out. The queue holds at most 50 tickets. If you take a ticket when
it is full, the program says the queue is full and the ticket is not added.
The ticket number still goes up.

`run(infile, outfile)` runs the same menu on any pair of text streams.

## Using the library

```python
from bankqueue.ticketqueue import TicketQueue, QueueEmptyError, QueueFullError

queue = TicketQueue(50)
queue.enqueue(1)
queue.enqueue(2)
print(list(queue))      # [1, 2]
print(queue.dequeue())  # 1
print(len(queue))       # 1
print(queue.is_full())  # False
```

`queue.format()` renders the contents as `Isi List: 1 -> 2 -> NULL` with a
separator line after it. It returns `Queue kosong.` when the queue is empty.

Adding to a full queue with `enqueue` raises `QueueFullError`. Taking from an
empty one with `dequeue` raises `QueueEmptyError`.

The building blocks can also be used on their own:

```python
from bankqueue.linkedlist import LinkedList
from bankqueue.stack import Stack, to_binary

items = LinkedList([3, 1, 4])
items.push_front(0)
print(list(items))      # [0, 3, 1, 4]
print(items.pop_back()) # 4
print(1 in items)       # True
items.remove(1)
print(list(items))      # [0, 3]

stack = Stack()
stack.push(7)
print(stack.peek())     # 7
print(stack.pop())      # 7

print(to_binary(10))    # 1010
print(to_binary(0))     # '' (empty for values below 1)
```

`LinkedList` also works on nodes directly. It has `find`, `find_previous`,
`has_node`, `insert_node_first`, `insert_node_after`, `insert_node_last`,
`remove_after`, `clear` and `format`.

The queue and the menu keep everything in memory only. Nothing is saved
between runs.

## Running the tests

```
pip install .[test]
pytest
```