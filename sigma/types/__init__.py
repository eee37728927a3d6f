"""Runtime value types: symbols, nil, errors, lambdas and environments."""
