# basicds

Small, classic data structures written in plain Python:

| Class | Module | What it is |
|-------|--------|------------|
| `LinkedList` | `basicds.linked_list` | Singly linked list with front/back access, indexed insert and remove, reversal |
| `LinkedQueue` | `basicds.linked_queue` | Unbounded FIFO queue built on linked nodes |
| `ArrayQueue` | `basicds.array_queue` | FIFO queue over a fixed number of slots; slots are not reused after dequeue |
| `Vector` | `basicds.vector` | Growable array that doubles its capacity when full |
| `Stack` | `basicds.stack` | LIFO stack with a fixed capacity |

Out-of-range access, popping or dequeuing an empty container and pushing into
a full one raise `IndexError`. Every container can be iterated front to back
(the stack from bottom to top), and `str()` of a container joins its items
with single spaces.

## Installing

```
pip install .
```

## Examples

```python
from basicds.linked_list import LinkedList

lst = LinkedList([1, 2, 3, 4])
lst.reverse()
print(lst)                    # 4 3 2 1
lst.insert(2, 10)             # 4 3 10 2 1
lst.value_n_from_end(1)       # 1
lst.remove_value(10)          # removes the first 10 only
lst.pop_front()               # 4
```

```python
from basicds.linked_queue import LinkedQueue

q = LinkedQueue()
q.enqueue(10)
q.enqueue(20)
q.dequeue()                   # 10
q.is_empty()                  # False
```

```python
from basicds.array_queue import ArrayQueue

q = ArrayQueue(2)             # the default capacity is 3
q.enqueue("a")
q.enqueue("b")
q.is_full()                   # True
q.dequeue()                   # 'a'
q.enqueue("c")                # IndexError: queue overflow - freed slots stay used
```

```python
from basicds.vector import Vector

v = Vector([5, 1, 5, 2])
v.remove(5)                   # removes every 5
v.prepend(0)
v[1]                          # 1
v.find(2)                     # 2
v.find(7)                     # -1
v.capacity()                  # 16
```

```python
from basicds.stack import Stack

s = Stack(capacity=2)         # the default capacity is 1000
s.push("a")
s.push("b")
s.peek()                      # 'b'
s.pop()                       # 'b'
len(s)                        # 1
```

## What it does not do

There is no ring-buffer queue: `ArrayQueue` never reuses a slot once it has
been dequeued, so a bounded queue that keeps accepting items as others leave
is not provided. `Vector` keeps track of a capacity that doubles as it fills
but never shrinks.

## Running the tests

```
pip install .[test]
pytest
```