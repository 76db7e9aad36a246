from deskdemos.contact import PersonContact


def test_new_contact_has_no_fields_set():
    contact = PersonContact()
    assert (contact.name, contact.email, contact.phone) == (None, None, None)


def test_fields_are_kept_as_given():
    contact = PersonContact(name="Mr Puffin", email="puffin@example.com", phone="x100")
    assert contact.name == "Mr Puffin"
    assert contact.email == "puffin@example.com"
    assert contact.phone == "x100"


def test_fields_can_be_set_one_at_a_time():
    contact = PersonContact()
    contact.name = "Mr Jellyfish"
    contact.email = "jelly@example.com"
    contact.phone = "x200"
    assert contact == PersonContact("Mr Jellyfish", "jelly@example.com", "x200")


def test_setting_same_value_keeps_it():
    contact = PersonContact(name="Ann")
    contact.name = "Ann"
    assert contact.name == "Ann"


def test_contacts_differ_by_field():
    assert PersonContact(name="Ann") != PersonContact(name="Bob")