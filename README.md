# knowhere

Building blocks for vector similarity search in Python. The package depends on NumPy.

## Modules

- `knowhere.metric`: `to_metric_type(name)` maps a metric name to a `MetricType`. It
  accepts `L2`, `IP`, `COSINE`, `HAMMING`, `JACCARD`, `TANIMOTO`, `SUBSTRUCTURE` and
  `SUPERSTRUCTURE`, in any case, and `COSINE` maps to `MetricType.INNER_PRODUCT`.
  `to_raft_distance_type(name)` covers `L2`, `IP`, `HAMMING` and `JACCARD` and returns a
  `RaftDistanceType`. Both raise `InvalidMetricTypeError` for names they do not know.
  `is_metric_type(name, expected)` compares two names without regard to case.
- `knowhere.range_util`: `RangeSearchResult` holds the results of many queries in the
  flat `lims` / `distances` / `labels` layout. You can iterate over it query by query,
  or get one query with `query(i)`. The other functions work on range results:
  - `distance_in_range` tests one distance. The range is `(radius, range_filter]` for
    inner product and `[range_filter, radius)` otherwise.
  - `count_valid_results` returns the `lims` that remain after filtering.
  - `filter_range_result` keeps only the entries that are in range. It raises
    `KnowhereError` if a kept entry's label is set in the given `Bitset`.
  - `filter_one_query` filters the results of a single query.
  - `merge_range_results` joins per-query lists into one result.
- `knowhere.bitset`: `Bitset` is a read-only view of bits packed little-endian into
  bytes. It has `test`, `count`, `is_empty` and `len()`. `gen_random_bitset(n, t, seed=42)`
  returns `n` packed bits, `t` of them set at random.
- `knowhere.vectors`: `normalize_vec`, `normalize_vecs` and `normalize` scale float NumPy
  arrays to unit length in place. They leave zero vectors and vectors already of unit
  length unchanged.
- `knowhere.lru_cache`: `LRUCache` is a thread-safe least-recently-used map with
  `put`, `get`, `in` and `len()`. Its default capacity is 10000. `hash_vec` hashes a
  float32 vector.
- `knowhere.factory`: `IndexFactory.instance()` returns a process-wide registry. Use
  `register(name, func)` to add a creator and `create(name, obj)` to build from it.
  `create` raises `KnowhereError` for names that are not registered.
- `knowhere.settings`: `get_config()` returns the shared `KnowhereConfig`. It records
  SIMD flags (`set_simd_type`), the BLAS threshold, the early-stop threshold and the
  `ClusteringType`. `version_message()` builds the version banner.
- `knowhere.evaluation`: these functions measure results against ground truth.
  - For top-k results: `recall_at_k` and `recall_vs_golden`.
  - For range results: `hits_in_range`, `range_recall` and `range_accuracy`.
  - `check_distance` raises `KnowhereError` when a result's distance differs from the
    ground truth by the tolerance or more.
  - `normalize_rows` normalises rows in double precision.
- `knowhere.annfiles`: `parse_ann_test_name`, `parse_ann_test_name_with_range` and
  `parse_ann_test_name_with_range_multi` split data set names such as
  `sift-128-euclidean` or `sift-128-euclidean-range` into an `AnnTestName`. An
  `AnnTestName` has `name`, `dim`, `metric`, `file_name`, `is_binary` and
  `needs_normalization`.
- `knowhere.errors`: `KnowhereError` is the base error. `InvalidMetricTypeError`,
  `InvalidParamError` and `InvalidValueError` derive from it.

## Example

```python
from knowhere.metric import to_metric_type, MetricType
from knowhere.range_util import RangeSearchResult, filter_range_result
from knowhere.evaluation import recall_at_k
from knowhere.annfiles import parse_ann_test_name

assert to_metric_type("cosine") is MetricType.INNER_PRODUCT

result = RangeSearchResult(lims=[0, 2, 3], distances=[0.1, 0.9, 0.4], labels=[7, 3, 5])
kept = filter_range_result(result, is_ip=False, radius=0.5, range_filter=0.0)
print(kept.lims.tolist(), kept.labels.tolist())  # [0, 1, 2] [7, 5]

print(recall_at_k([[1, 2, 3]], [[1, 4, 3]], 3))  # 0.666...

name = parse_ann_test_name("sift-128-euclidean")
print(name.dim, name.metric, name.file_name)  # 128 euclidean sift-128-euclidean.hdf5
```

## What it does not do

- It does not search. There is no index and no brute-force k-NN or range search; the
  package only processes and evaluates results that some search produced.
- It does not check configuration parameters.
- It does not read or write index files or HDF5 data. `annfiles` only interprets data
  set names.
- It has no timing utilities and no command-line interface.
- `settings` only stores values. Those values do not change how any computation runs.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```