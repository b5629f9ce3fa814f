# patternkit

A compact collection of classic object-oriented design patterns, each one a
small, self-contained module you can read, import and run.

| Module | Pattern | What it models |
| --- | --- | --- |
| `patternkit.aggregation` | Aggregation | A `University` that holds `Professor`s who also exist on their own |
| `patternkit.shapes` | Decorator | `ColoredShape` and `TransparentShape` wrapping any `Shape` |
| `patternkit.pizza` | Decorator | `TomatoTopping`, `ExtraCheese` and `JalapenoTopping` adding to the price of a `BasicPizza` |
| `patternkit.person_factory` | Factory | `new_person` returning a `Person`, or a `TiredPerson` for ages above 100 |
| `patternkit.employee_factory` | Factory generator | `EmployeeFactory` and the `employee_factory` closure |
| `patternkit.traffic` | Observer | `TrafficManagement` telling each `Person` when they may drive |
| `patternkit.stock` | Observer | An `Item` telling subscribed `Customer`s it is back in stock |
| `patternkit.population` | Singleton | A database of city populations loaded once from a file |
| `patternkit.payments` | Strategy | `CreditCard`, `DebitCard` and `UPI` behind one `PaymentMethod` |

## Installation

```
pip install patternkit
```

The package has no runtime dependencies. To run the tests:

```
pip install "patternkit[test]"
pytest
```

## Running the demos

Each module has a `main()` that prints a short demonstration, installed as a
command:

```
patternkit-aggregation
patternkit-shapes
patternkit-pizza
patternkit-person-factory
patternkit-employee-factory
patternkit-traffic
patternkit-stock
patternkit-population
patternkit-payments
```

## Using the modules

Decorated shapes compose, because every decorator is itself a `Shape`:

```python
from patternkit.shapes import Square, ColoredShape, TransparentShape

shape = TransparentShape(ColoredShape(Square(10), "Red"), 10)
print(shape.render())
# Square with side 10.000000 has color Red has transparency 10.000000%
```

Toppings wrap a pizza and add to its `price`:

```python
from patternkit.pizza import BasicPizza, ExtraCheese, JalapenoTopping

pizza = JalapenoTopping(ExtraCheese(BasicPizza(10)))
assert pizza.price == 28
```

Factories can be objects or plain functions:

```python
from patternkit.employee_factory import EmployeeFactory, employee_factory

developers = EmployeeFactory("Developer", 80000)
hire_hr = employee_factory("HR", 30000)

dev = developers.create("Akshat")
hr = hire_hr("Helen")
```

Observers are notified in the order they subscribed. In `patternkit.traffic`,
`TrafficManagement.notify_all_observers()` tells every subscribed `Person`
whether they may drive, unsubscribes those who now may, and returns them.
Eligibility is decided by an `Eligibility` rule; the default `AgeEligibility`
accepts anyone older than 18.

```python
from patternkit.traffic import Person, TrafficManagement

traffic = TrafficManagement()
young = Person("Yashika", 17)
traffic.subscribe(young)
traffic.notify_all_observers()   # not yet eligible
young.age = 20
traffic.notify_all_observers()   # eligible, and unsubscribed
```

Payment methods are used through `make_payment`, which pays and returns the
remaining limit (credit card) or balance (debit card, UPI). Any other kind of
method raises `PaymentError`.

```python
from patternkit.payments import CreditCard, make_payment

card = CreditCard(card_number="0000", name="Example", cvv="000", limit=1000)
assert make_payment(card, 200) == 800
```

Code that needs population figures depends on the `Database` interface, so a
`DummyDatabase` can stand in for the file-backed `SingletonDatabase`:

```python
from patternkit.population import DummyDatabase, total_population

assert total_population(DummyDatabase(), ["alpha", "gamma"]) == 11
```

Unknown cities count as 0.

## The population file

`read_populations(filename)` reads a text file of alternating lines, a city
name followed by its population as an integer. A city without a population
line, or a population that is not an integer, raises `PopulationFileError`.

`get_singleton_database(path="./population.txt")` reads the file on the first
call only and returns the same `SingletonDatabase` on every later call, also
when a different path is given. If the file cannot be opened or is malformed,
it raises `RuntimeError` and no database is created.

## What it does not do

These are teaching examples. The population database is read-only and lives in
memory; nothing is written back to disk. Payments only adjust an in-memory
limit or balance and never decline an amount. The demos take no command-line
options.