# deskdemos

Four small desktop programs built on Python's standard library. The
windows use `tkinter`, so the Python you install into needs Tk support.

| Command                 | What it does                                                          |
|-------------------------|-----------------------------------------------------------------------|
| `deskdemos-hello`       | A window with a label and a "Click Me" button that changes the label  |
| `deskdemos-alarm`       | A 24-hour clock that plays an alarm sound at a chosen hour and minute |
| `deskdemos-contacts`    | A read-only table of two sample contacts (Name, Email, Telephone)     |
| `deskdemos-addressbook` | An address book you can add to and delete from, kept in a CSV file    |

None of the commands takes options besides `-h`/`--help`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The address book

```
deskdemos-addressbook
```

Contacts are read from `contacts.csv` in the current directory when the
program starts. If the file is missing, `contacts.csv does not exist` is
printed and the book starts empty; if it cannot be read,
`error: unable to open contacts.csv` is printed and the book starts empty.

- **New Contact** opens a form with Contact Name (up to 100 characters),
  Email (up to 100) and Phone (up to 50) fields. **Add Contact** appends
  the entry, saves the file straight away and closes the form.
- **Delete Contact** removes the selected row and saves the file.

If a save fails, `error: unable to save contacts.csv file` is printed and
the change stays in the window. Saving writes a new file beside the old
one and moves it into place, so a failed save leaves the old file as it
was.

Each line of `contacts.csv` holds one contact: name, email and phone,
each followed by a comma:

```
Ada Example,ada@example.com,ext 100,
Bob Example,bob@example.com,ext 200,
```

When a line is read, empty fields are skipped: the first three non-empty
fields become name, email and phone, and missing ones stay unset.

The same functions are available from Python:

```python
from deskdemos.addressbook import load_store

store = load_store("contacts.csv")
store.add_contact("Carol Example", "carol@example.com", "ext 300")  # saves
store.delete(0)                                                      # saves
print([contact.name for contact in store])
```

`load_store(path)` returns a `ContactStore`, which supports `len()`,
iteration and indexing, and has `add_contact(name, email, phone)`,
`delete(position)` (raises `IndexError` for a position out of range) and
`save()`.

`deskdemos.storage` offers the file format on its own:

- `parse_line(line)` turns one line into a contact;
- `format_line(contact)` renders one line, stopping at the first unset field;
- `file_exists(path)` tells whether a file can be opened for reading;
- `open_contacts(path)` reads a whole file (raises `OSError` if it cannot);
- `save_contacts(contacts, path)` replaces a file with the given contacts.

Each contact is a `deskdemos.contact.PersonContact` dataclass with
optional `name`, `email` and `phone` fields.

### What the address book does not do

- Contacts cannot be edited in place; delete one and add it again.
- There is no searching or sorting.
- Fields are not quoted: a comma inside a name, e-mail or phone number
  splits the field when the file is read back, and an empty field shifts
  the ones after it.

## The alarm clock

```
deskdemos-alarm
```

The clock face updates once a second in `HH:MM:SS` form. The alarm is
set from the Hour (0–23) and Min (0–59) spinners whenever their arrows
are used; until then it is set to 00:00, whatever the spinners show.
When the time reaches the alarm hour and minute on second zero, the
program runs `aplay alarm.wav` in the current directory and waits for it
to finish, so `aplay` and an `alarm.wav` file need to be present for a
sound to play. If the player cannot be started, a message is printed on
standard error and the clock carries on. **Minimise** iconifies the
window.

From Python, `deskdemos.alarm.AlarmClock(alarm_hour, alarm_minute, command)`
holds the setting (out-of-range values raise `ValueError`);
`is_alarm_time(now)` and `tick(now)` take a `datetime`, and
`format_time(now)` gives the clock-face text.

## The other two

```
deskdemos-hello
deskdemos-contacts
```

`deskdemos-hello` shows a greeting label until the button is pressed,
then "Button Clicked" (`deskdemos.hello.HelloWindow.on_click`).
`deskdemos-contacts` lists the sample contacts built by
`deskdemos.contacts_view.create_contact_model`, with the first row
selected; `column_values(contact)` gives the text of a row's cells.