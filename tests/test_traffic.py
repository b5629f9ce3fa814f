from dataclasses import dataclass

from patternkit.traffic import (
    AgeEligibility,
    Eligibility,
    Person,
    TrafficManagement,
    main,
)


def test_age_eligibility_boundary():
    rule = AgeEligibility()
    assert rule.is_eligible(Person("A", 18)) is False
    assert rule.is_eligible(Person("B", 19)) is True


def test_person_id_is_numeric_in_range():
    for _ in range(50):
        value = int(Person("A", 1).id)
        assert 10 <= value <= 100


def test_default_eligibility_is_age_based():
    minor = Person("A", 18)
    adult = Person("B", 19)
    assert minor.eligibility.is_eligible(minor) is False
    assert adult.eligibility.is_eligible(adult) is True


def test_notify_all_drops_eligible(capsys):
    adult = Person("Akshat", 28)
    minor = Person("Yashika", 17)
    traffic = TrafficManagement()
    traffic.subscribe(adult, minor)
    dropped = traffic.notify_all_observers()
    assert dropped == [adult]
    assert traffic.persons == [minor]
    out = capsys.readouterr().out
    assert "Observing: Akshat\n" in out
    assert "Congrats Akshat! you're allowed to drive now.\n" in out
    assert "Yashika you're not yet eligible to drive\n" in out


def test_age_change_makes_person_eligible(capsys):
    minor = Person("Yashika", 17)
    traffic = TrafficManagement()
    traffic.subscribe(minor)
    assert traffic.notify_all_observers() == []
    minor.age = 20
    assert minor.age == 20
    assert traffic.notify_all_observers() == [minor]
    assert traffic.persons == []
    out = capsys.readouterr().out
    assert "Yashika new age set to: 20\n" in out


def test_invalid_observer_is_reported_and_kept(capsys):
    @dataclass
    class Stranger:
        name: str

    stranger = Stranger("X")
    traffic = TrafficManagement()
    traffic.subscribe(stranger)
    assert traffic.notify_all_observers() == []
    assert traffic.persons == [stranger]
    assert "Invalid observer type" in capsys.readouterr().out


def test_unsubscribe_removes_one_entry_per_argument():
    person = Person("A", 5)
    other = Person("A", 5)
    traffic = TrafficManagement()
    traffic.subscribe(person, other, person)
    traffic.unsubscribe(person)
    assert len(traffic.persons) == 2
    assert traffic.persons[0] is other
    assert traffic.persons[1] is person


def test_custom_eligibility():
    class Never(Eligibility):
        def is_eligible(self, observer):
            return False

    person = Person("Old", 90, Never())
    traffic = TrafficManagement()
    traffic.subscribe(person)
    assert traffic.notify_all_observers() == []
    assert traffic.persons == [person]


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.count("Congrats") == 2
    assert "Yashika you're not yet eligible to drive" in out
    assert "Congrats Yashika! you're allowed to drive now." in out