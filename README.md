# icpckit

Algorithms that come up again and again in programming contests, written as
plain Python with no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `icpckit.arithmetic` | `gcd`, `lcm`, `extgcd`, `power`, `modinv`, `modinv_fermat`, modular add/sub/mul, `binpow`, `matmul`, `matpow`, `fibonacci`, `isqrt`, `is_perfect_square`, `is_perfect_power`, `catalan`, `binomial`, `stirling2` |
| `icpckit.combinatorics` | `FactorialTable` (factorial, binomial, permutations, Catalan, Stirling, stars and bars, multinomial), `bell_numbers`, `derangement`, `lucas_binomial`, `inclusion_exclusion` |
| `icpckit.primes` | `is_prime`, `miller_rabin`, `is_prime_mr`, `sieve`, `linear_sieve`, `smallest_prime_factors`, `primes_up_to`, `factorize`, `factorize_with_spf`, `pollard_rho`, `factorize_rho`, `segmented_sieve`, `count_primes`, `next_prime`, `prev_prime`, `prime_power`, `twin_primes`, `goldbach` |
| `icpckit.number_theory` | `phi`, `phi_sieve`, `sum_phi`, divisor functions, `crt`, `extended_crt`, `mobius`, `mobius_sieve`, `carmichael`, `jordan_totient`, `legendre`, `jacobi`, `is_quadratic_residue`, `modular_sqrt` |
| `icpckit.transforms` | `fft`, `fft_multiply`, `convolution`, `ntt`, `ntt_multiply` (modulo 998244353), `poly_add`, `poly_subtract`, `poly_inverse`, `wht`, `xor_convolution` |
| `icpckit.matrix` | `Matrix` modulo 10^9 + 7 with `*`, `+`, `-`, `power`, `determinant`, `inverse`, `transpose`; `zeros`, `identity`, `gaussian_elimination`, `matrix_rank`, `lu_decomposition`, `fibonacci`, `rotation_matrix` |
| `icpckit.pattern_matching` | `compute_lps`, `kmp_search`, `z_function`, `z_search`, `rabin_karp_search`, `boyer_moore_search`, `AhoCorasick` |
| `icpckit.palindromes` | `manacher`, `longest_palindrome`, `all_palindromes`, `is_palindrome`, `PalindromicTree`, `count_palindromic_substrings`, `min_insertions`, `palindrome_partitions`, `min_palindrome_cuts` |
| `icpckit.hashing` | `SingleHash`, `DoubleHash`, `PolynomialHash`, `ZobristHash`, `find_occurrences`, `longest_common_prefix`, `is_periodic`, `smallest_period`, `cyclic_hash`, `multiset_hash` |
| `icpckit.string_utils` | Lyndon words, case and whitespace helpers, Levenshtein/Hamming/Jaccard, longest common subsequence and substring, permutations and subsequences, validation, border arrays and periods, run-length `compress`/`decompress` |
| `icpckit.tries` | `Trie` (a multiset of words) and `BinaryTrie` for XOR queries |
| `icpckit.radix_tries` | `CompressedTrie` and `PersistentTrie` |
| `icpckit.suffix` | `SuffixArray`, `SuffixTree`, `SuffixAutomaton` |

## Examples

```python
from icpckit.arithmetic import gcd, fibonacci, binomial
from icpckit.primes import is_prime_mr, factorize
from icpckit.transforms import fft_multiply
from icpckit.matrix import Matrix, gaussian_elimination
from icpckit.pattern_matching import kmp_search, AhoCorasick
from icpckit.suffix import SuffixArray

gcd(48, 18)                         # 6
fibonacci(10)                       # 55
binomial(10, 3)                     # 120
is_prime_mr(1_000_000_007)          # True
factorize(60)                       # [(2, 2), (3, 1), (5, 1)]
fft_multiply([1, 2, 3], [4, 5, 6])  # [4, 13, 28, 27, 18]

m = Matrix([[1, 2], [3, 4]]) * Matrix([[5, 6], [7, 8]])
print(m)                            # rows printed space-separated

kind, x = gaussian_elimination([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]], [8, -11, -3])
# kind is Solutions.UNIQUE, x is close to [2.0, 3.0, -1.0]

kmp_search("abababa", "aba")        # [0, 2, 4]

ac = AhoCorasick()
for word in ("he", "she", "his", "hers"):
    ac.add_pattern(word)
ac.search("ushers")                 # (start, pattern id) pairs; builds itself if needed

SuffixArray("banana").find_occurrences("ana")  # [3, 1], in suffix-array order
```

## Conventions

- Functions that work modulo a number take the modulus as an argument,
  defaulting to 10^9 + 7 where one is needed. `FactorialTable` is built once
  for a chosen size and modulus and then answers queries in constant time.
- Cases with no answer are reported the Python way: `modinv`, `crt`,
  `extended_crt` and `prev_prime` raise `ValueError`; `goldbach`,
  `prime_power` and `modular_sqrt` return `None`; `Matrix.inverse` raises
  `ValueError` for a singular matrix; `BinaryTrie.max_xor` and `min_xor`
  raise `ValueError` on an empty trie.
- `gaussian_elimination` returns a `Solutions` value (`NONE`, `UNIQUE`,
  `INFINITE`) with one solution, free variables set to zero.
- `SuffixArray` and `SuffixTree` append `"$"` to the text; `SuffixTree`
  rejects text that already contains it.

## What it does not do

This is a library only. It has no command-line program and no template for
reading contest input from standard input. It does not compute discrete
logarithms.