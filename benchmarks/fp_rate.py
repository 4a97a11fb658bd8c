'''
Measures write/read time and the empirical false positive rate of the filter: out of `n_items * skip` consecutive
integers, every `skip`-th one is put, then all of them are queried. The rate should be close to the configured one.
'''

import sys
import itertools
from argparse import ArgumentParser

import pandas as pd
from tqdm import tqdm

sys.path.append('.')  # make it runnable from the top level

from benchmarks import Timer, make_experiments_args
from minibloom import BloomFilter


def measure(n_items, p, skip):
    f = BloomFilter.create(n_items, p)
    keys = [str(i) for i in range(n_items * skip)]

    with Timer() as write_t:
        for i in range(0, len(keys), skip):
            f.put(keys[i])

    fp_count = 0
    with Timer() as read_t:
        for i, k in enumerate(keys):
            found = f.maybe(k)
            if i % skip == 0 and not found:
                raise AssertionError(f'{k} was put but the filter says it is not there')
            if i % skip != 0 and found:
                fp_count += 1

    return {'n_items': n_items, 'p': p, 'skip': skip, 'bits': f.size, 'hashes': f.hashes,
            'bytes': f.bits.byte_size, 'write': float(write_t), 'read': float(read_t),
            'fp_rate': fp_count / (len(keys) - n_items)}


def main():
    parser = ArgumentParser()
    parser.add_argument('-e', type=int, help='experiment id', default=0)
    parser.add_argument('-o', type=str, help='path to output csv file', default='fp_rate.csv')
    args = parser.parse_args()

    n_items_list, probs, skips = make_experiments_args(args.e)
    data = [measure(n, p, s) for n, p, s in tqdm(list(itertools.product(n_items_list, probs, skips)))]

    df = pd.DataFrame(data)
    df.to_csv(args.o, index=False)
    print(df.to_string(index=False))


if __name__ == '__main__':
    main()
