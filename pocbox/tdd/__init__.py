"""Small examples: wallet, dictionary, shapes, countdown, website checking, racing and greeting."""