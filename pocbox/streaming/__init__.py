"""Config loading, JSON logging, a partition-splitting consumer, a producer service and a Flask route."""