from patternkit.stock import Customer, Item, main


def test_register_adds_in_order(capsys):
    first = Customer("Shayan", "1233")
    second = Customer("Sharan", "98932")
    item = Item("Shirt")
    item.register(first, second)
    assert item.observers == [first, second]
    assert "Shirt subscribed by 1233\n" in capsys.readouterr().out


def test_update_availability_notifies(capsys):
    customer = Customer("Shayan", "1233")
    item = Item("Shirt", False)
    item.register(customer)
    capsys.readouterr()
    item.update_availability()
    assert item.in_stock is True
    out = capsys.readouterr().out
    assert out == "Notifying all users\nHey 1233! Shirt is in stock\n"


def test_deregister_by_identity(capsys):
    first = Customer("Same", "1")
    twin = Customer("Same", "1")
    item = Item("Hat")
    item.register(first, twin)
    item.deregister(first)
    assert len(item.observers) == 1
    assert item.observers[0] is twin
    assert "1 unsubscribed from Hat\n" in capsys.readouterr().out


def test_deregister_unknown_changes_nothing(capsys):
    item = Item("Hat")
    member = Customer("A", "a")
    item.register(member)
    capsys.readouterr()
    item.deregister(Customer("B", "b"))
    assert item.observers == [member]
    assert capsys.readouterr().out == ""


def test_custom_observer_receives_message():
    class Recorder:
        id = "rec"

        def __init__(self):
            self.messages = []

        def update(self, info):
            self.messages.append(info)

    recorder = Recorder()
    item = Item("Shirt")
    item.register(recorder)
    item.notify_all()
    assert recorder.messages == ["Hey rec! Shirt is in stock"]


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Hey 1233! Shirt is in stock" in out
    assert "Hey 98932! Shirt is in stock" in out