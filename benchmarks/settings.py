def make_experiments_args(experiment_id):
    experiments = {
        0: [  # basic toy experiment
            [1_000],      # n_items_list
            [0.1, 0.01],  # probs
            [10],         # skips
        ],
        1: [  # how close the empirical rate gets to the configured one
            [1_000, 10_000, 100_000],
            [0.5, 0.1, 0.01, 0.001, 0.0001],
            [10, 50],
        ]
    }
    return experiments[experiment_id]
