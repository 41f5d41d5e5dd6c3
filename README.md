# pocbox

pocbox is a set of small, self-contained examples. You can import and use each one.

It has two sub-packages:

- `pocbox.tdd` holds small examples:
  - a Bitcoin wallet
  - a word dictionary
  - geometric shapes
  - a countdown
  - a concurrent website checker
  - an HTTP racer
  - a greeter server
- `pocbox.streaming` holds the parts of a Kafka-style message service:
  - configuration models
  - a YAML config loader
  - JSON logging
  - a partition-splitting consumer
  - a producer service
  - a Flask app that accepts messages

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Commands

```
pocbox-greeter [--addr HOST:PORT]
```

This starts a threaded HTTP server. It listens on `:5001` by default, which means every interface on port 5001. It answers every GET, POST, PUT, DELETE or PATCH request with `200` and the plain-text body `Hello, world`.

```
pocbox-countdown
```

This prints `3`, `2` and `1` on separate lines, then `Go!`. It sleeps for one second after each number.

## The tdd examples

### Wallet (`pocbox.tdd.banking`)

```python
from pocbox.tdd.banking import Bitcoin, InsufficientFundsError, Wallet

wallet = Wallet()
wallet.deposit(Bitcoin(20))
wallet.withdraw(Bitcoin(10))
print(wallet.balance())        # 10 BTC

try:
    wallet.withdraw(Bitcoin(100))
except InsufficientFundsError as exc:
    print(exc)                 # cannot withdraw, insufficient funds
```

When a withdrawal fails, the balance stays as it was.

### Dictionary (`pocbox.tdd.dictionary`)

`Dictionary` is a `dict` subclass with four extra methods:

```python
from pocbox.tdd.dictionary import Dictionary, NotFoundError

words = Dictionary({"test": "this is just a test"})
words.search("test")           # 'this is just a test'
words.update("test", "new definition")
words.delete("test")

try:
    words.search("test")
except NotFoundError:
    ...
```

Each method raises an error in one case:

| Method | Raises | When |
| --- | --- | --- |
| `search` | `NotFoundError` | the word is unknown |
| `add` | `WordExistsError` | the word is already present |
| `update` | `WordDoesNotExistError` | the word is missing |
| `delete` | `WordDoesNotExistError` | the word is missing |

All of these errors derive from `DictionaryError`.

### Shapes (`pocbox.tdd.shapes`)

```python
from pocbox.tdd.shapes import Circle, Rectangle, Triangle

Rectangle(10.5, 10.0).perimeter()   # 41.0
Rectangle(5.0, 4.5).area()          # 22.5
Circle(10).area()                   # 314.1592653589793
Triangle(12, 6).area()              # 36.0
```

Every shape is a frozen dataclass and a subclass of the abstract `Shape`.

### Countdown (`pocbox.tdd.countdown`)

`countdown(out, sleeper)` writes `3\n2\n1\nGo!` to any text stream. It calls `sleeper.sleep()` after each number.

`Sleeper` is the abstract base class. `ConfigurableSleeper(duration, sleep_func)` calls `sleep_func(duration)`, so tests can pass in a fake sleep function.

### Website checker (`pocbox.tdd.websites`)

```python
from pocbox.tdd.websites import check_websites

check_websites(lambda url: not url.startswith("waat://"),
               ["http://www.example.com", "waat://nowhere"])
# {'http://www.example.com': True, 'waat://nowhere': False}
```

`check_websites` runs the checker on each URL in its own thread.

### Racer (`pocbox.tdd.racer`)

- `racer(a, b)` fetches both URLs at the same time and returns the one whose request finishes first. It gives up after ten seconds.
- `configurable_racer(a, b, timeout)` takes the timeout in seconds. If neither request finishes in time, it raises `RacerTimeoutError`, which is a subclass of `TimeoutError`.

A request that fails also counts as finished.

### Greeter (`pocbox.tdd.greeter`)

- `greet(writer, name)` writes `Hello, <name>` to `writer`.
- `GreeterHandler` is the `http.server` request handler used by the `pocbox-greeter` command.

## The streaming service

### Configuration

`pocbox.streaming.settings.load_config(search_paths=None)` reads the first file it finds named `config.yaml`, `config.yml` or `config`.

- It searches the directories in `search_paths`, in order.
- If you give no paths, it searches `configs` under the working directory, then `configs`, then `../../configs`.
- It raises `ConfigError` if no file is found, or if the file cannot be read or understood.

An example `config.yaml`:

```yaml
kafka:
  connection:
    brokers: ["localhost:9092"]
  topics:
    default-producer: outgoing
    default-consumer: incoming
    default-consumer-group: example-group
server:
  port: 8080
  mode: debug
  loglevel: info
```

`pocbox.streaming.models.app_configuration_from_mapping(data)` builds an `AppConfiguration` from a mapping you have already parsed.

- Keys are matched without regard to case.
- Missing keys take empty or zero values.
- A value of the wrong kind raises `ValueError`.

The `AppConfiguration` holds `kafka` (`KafkaProperties` with `connection` and `topics`) and `server` (`ServerConfiguration`).

### Consuming (`pocbox.streaming.consumer`)

`SplitConsumer(handler)` runs one `PartitionConsumer` thread per assigned topic partition. Each partition consumer passes every record's key and value to `handler`.

- `assigned(mapping)` starts consumers for the partitions in the mapping.
- `lost(mapping)` stops those consumers and forgets them. It raises `KeyError` for a partition that has no consumer.
- `dispatch(fetches)` hands the batches in a `Fetches` object to their partition consumers and prints any fetch errors.
- `poll(client)` calls `client.poll_fetches()` repeatedly until it returns a `Fetches` object with `client_closed` set.

`process_kafka_message(key, value)` is a handler that prints the message.

`create_topics(admin, topics)` calls `admin.create_topics(...)` with 3 partitions and replication factor -1 for the producer and consumer topics. An error saying `TOPIC_ALREADY_EXISTS` is ignored. Any other error is raised again as `RuntimeError`.

### Producing (`pocbox.streaming.service`)

`KafkaService(client).produce_message(message)` turns a `ProduceMessageRequest` into a `Record` and calls `client.produce(record, on_delivery, timeout=5.0)`. It does not wait for delivery; the delivery result is printed by the callback.

### HTTP (`pocbox.streaming.routes`)

`create_app(kafka_service)` returns a Flask app with a single route, `POST /produce`. `setup_routes(app, kafka_service)` adds the same route to an app you already have.

The route expects a JSON body with non-empty string fields `key` and `message`; `parse_produce_request` does this check.

- If the body is valid, the route calls `kafka_service.produce_message` and answers `202` with `{"message": "Message produced successfully!"}`.
- Otherwise it answers `400` with `{"error": "Invalid input"}`.

### Logging (`pocbox.streaming.logging_setup`)

`init_logger(LoggerConfig(level="debug"))` sets up the root logger to write JSON lines to standard output.

- Each line has the keys `time`, `level` and `msg`, plus any extra attributes on the record.
- `parse_log_level` accepts `DEBUG`, `INFO`, `WARN`, `WARNING` and `ERROR`, in any case. Any other name means INFO.

## What is not included

The streaming parts do not include a Kafka client and do not connect to a broker. `SplitConsumer.poll`, `KafkaService` and `create_topics` work with any object that has the methods listed above, so you must supply one.

There is no command that loads the configuration, starts the consumer and serves the Flask app together. You need to connect these pieces yourself.