# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a fixed set of operations. It prints the operations it used, one per line.

The operations are:

| op    | effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up by one (the top goes to the bottom)   |
| `rb`  | rotate `b` up by one                                |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down by one (the bottom goes to the top) |
| `rrb` | rotate `b` down by one                              |
| `rrr` | `rra` and `rrb` together                            |

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
```

prints

```
sa
rra
```

Numbers can be given as separate arguments or together in one quoted
argument, separated by spaces:

```
push-swap "4 67 3" 87 23
```

- With no arguments the command prints nothing and exits with status 0.
- Input that is already sorted produces no output.
- If a number holds a character other than a digit or `-`, if the
  arguments hold no number at all, if a number does not fit in a 32-bit
  signed integer, or if a number appears twice, the command writes
  `Error` to standard error and exits with status 1.

The command is `pushswap.cli.main`, which also accepts the argument list
directly: `main(["3", "2", "1"])` returns the exit status.

## Library use

The solver works on ranks `0` to `n - 1`; `coordinate_compression` turns
number strings into those ranks.

```python
import io
from pushswap.parsing import check_input, coordinate_compression
from pushswap.solver import push_swap

ranks = coordinate_compression(check_input(["50 10 40", "20", "30"]))
out = io.StringIO()
stacks = push_swap(ranks, out)
print(stacks.operations)       # the moves, also written to out
print(list(stacks.a))          # [0, 1, 2, 3, 4]
```

- `pushswap.parsing`: `check_input`, `format_input`, `is_outside_int_range`,
  `check_duplicate`, `coordinate_compression` and the `InputError` exception.
- `pushswap.stacks.Stacks`: the two stacks (deques `a` and `b`, top first)
  with one method per operation. Each operation that is carried out writes
  its name to the stream given as `out` (standard output when `None`) and
  appends it to `operations`. `sb`, `ss`, `pb`, `rr` and `rrr` are
  reported even when a stack they act on is empty.
- `pushswap.search`: `search_insert_min_node` finds the element of `a`
  that is cheapest to rotate into place in `b`, returned as a
  `SearchResult`.
- `pushswap.solver`: `push_swap` and the steps it is built from
  (`sort_two_element`, `sort_three_element`, `move_stack`,
  `return_stack_to_a_from_b`, `rotate_sort_a`, `is_sorted`, ...).

## Helper modules

The package also carries small general-purpose helpers:

- `pushswap.charclass`: ASCII tests and case conversion (`isdigit`,
  `isalpha`, `isalnum`, `isascii`, `isprint`, `tolower`, `toupper`).
- `pushswap.memory`: byte-buffer routines (`memset`, `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy`, `memmove`).
- `pushswap.strings`: `atoi` (32-bit result), `itoa`, `split`, `strchr`,
  `strrchr`, `strdup`, `strjoin`, `strlen`, `strncmp`, `strnstr`.
- `pushswap.stredit`: `striteri`, `strlcat`, `strlcpy`, `strmapi`,
  `strtrim`, `substr`.
- `pushswap.llist`: a singly linked list (`ListNode`, `lstnew`,
  `lstadd_front`, `lstadd_back`, `lstsize`, `lstlast`, `lstiter`,
  `lstmap`, `lstdelone`, `lstclear`).
- `pushswap.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`
  writing to a text stream.
- `pushswap.printf`: `render` and `printf` for the conversions `%c`, `%s`,
  `%p`, `%d`, `%i`, `%u`, `%x`, `%X` and `%%`, with no widths, flags or
  precision.

## Running the tests

```
pip install ".[test]"
pytest
```