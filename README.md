# rsnimons

`rsnimons` holds the core of a small text-based hospital simulation. In it,
managers lay out rooms, doctors diagnose and treat patients, and patients
take their medicine in the order their illness calls for.

The package covers these parts:

- the in-memory hospital state: users, medicines, diseases, prescriptions,
  the floor plan with its room queues, patient inventories and stomachs;
- loading that state from a data folder and writing it back;
- the patient actions for taking a medicine and taking an antidote;
- the shutdown step that offers to save before leaving.

It has no dependencies outside the standard library.

## Data folder

A hospital lives in one folder that holds five files:

| File                | Contents                                            |
|---------------------|-----------------------------------------------------|
| `user.csv`          | accounts, roles, vital signs, lives and aura        |
| `obat.csv`          | medicines (`obat_id;nama_obat`)                     |
| `penyakit.csv`      | diseases with the min/max range of each vital sign  |
| `obat_penyakit.csv` | which medicine treats which disease, and in what order |
| `config.txt`        | floor plan, room and queue capacity, doctors, queues, inventories and stomachs |

The CSV files use `;` as the separator and have a header line.
`config.txt` has no header. Its fields are separated by spaces.

## Loading and saving

```python
from rsnimons.storage import load_hospital, write_hospital

hospital = load_hospital("data/default")
# ... change things ...
write_hospital(hospital, "data/backup")
```

`load_hospital(folder)` returns a `Hospital` with the attributes `users`,
`medicines`, `diseases`, `prescriptions` and `config`. It raises
`FileNotFoundError` when one of the five files is missing. It raises
`ValueError` when `config.txt` has fewer lines than its counts say. After
loading, each user's `room` and `queue_room` name the room they are in or
are queued for. `write_hospital(hospital, folder)` writes all five files into
a folder that must already exist.

`save(hospital, data_root, read_line)` asks for a folder name through
`read_line` and keeps asking until it gets one that `is_valid_folder_name`
accepts: not empty, at most 255 bytes, and no `/`. It creates the folder under
`data_root` if it is missing, then writes every file into it and returns the
folder. `data_root` defaults to `../data` and `read_line` to `input`.

## Patient actions

```python
from rsnimons.pharmacy import Session, minum_obat, minum_penawar
```

A `Session` records who is logged in. Its `state` is 0 when nobody is, 1 for
a manager, 2 for a doctor and 3 for a patient. Its `user_id` is -1 when nobody
is logged in, and `logout()` resets both.

`minum_obat(hospital, session, read_line)` lists the medicines in the
logged-in patient's inventory. It reads a choice and moves that medicine into
the patient's stomach. If the medicine is the wrong one for the current step
of the patient's treatment, the patient loses a life. Losing the last one
removes the patient from the hospital and logs the session out. It returns
the id of the medicine taken, or `None` when nothing was taken.

`minum_penawar(hospital, patient_id)` takes the last medicine out of the
stomach and returns it to the inventory. It returns that medicine's id, or
`None` when the stomach is empty.

`rsnimons.shutdown.exit_program(hospital, data_root, read_line)` asks whether
to save and accepts only `y` or `n`. It saves through `save` on `y`, then
prints the logo and a goodbye. It returns the folder saved to, or `None`.

All of these print their messages, coloured with ANSI codes, to standard
output.

## Building blocks

The smaller modules stand on their own:

```python
from rsnimons.containers import Queue, Stack
from rsnimons.matrix import room_code

q = Queue()
q.enqueue(7)
q.enqueue(9)
q.dequeue()        # 7

s = Stack()
s.push(1)
s.push(2)
s.peek()           # 2

room_code(0, 0)    # "A1"
```

- `rsnimons.containers`: `LinkedList`, `Queue` and `Stack` of integers.
  `Queue.peek()` returns `None` when the queue is empty. `Stack.peek()` and
  `Stack.pop()` raise `IndexError` when the stack is empty. A stack iterates
  from the top down.
- `rsnimons.matrix`: `Matrix`, a zero-filled integer grid that tracks its used
  extent; `FloorPlan` of `Room`s, each with a code, a doctor id and a queue;
  and `room_code`.
- `rsnimons.lookup`: `StringMap` and `StringSet`, both with a fixed capacity.
- `rsnimons.belongings`: `PatientBelonging` and `BelongingList`.
- `rsnimons.medicine`, `rsnimons.disease`, `rsnimons.user`: the records and
  their lists. Each list has `sort`, a binary search by id and `write` for its
  CSV file.
- `rsnimons.prescriptions`: `PrescriptionMap`, which says which medicine is
  taken at which step for a disease.
- `rsnimons.config`: `Config`, the contents of `config.txt`.
- `rsnimons.parsing`: `parse_fields` for CSV lines, `parse_config_fields` for
  `config.txt` lines, and `to_lower`.
- `rsnimons.display`: the `Color` codes, `colored`, the logo and the ASCII art.

## What the package does not do

The package has no command and no interactive menu that runs the hospital.
Logging in, registering, recovering a password, the help screen, viewing and
searching users, assigning doctors, changing the floor plan, check-up
registration, diagnosis, treatment and queue handling are not part of it.
Only the medicine, antidote, save and exit steps are here.