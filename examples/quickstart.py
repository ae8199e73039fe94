# %% [markdown]
# # fuzzyseq quickstart
#
# Exact edit distances and similarity scores for strings and for any
# indexable sequence.
#
# | Part | Topic |
# |------|-------|
# | 1 | Edit distances |
# | 2 | Similarity scores |
# | 3 | Beyond strings |
# | 4 | Batch search and polars |

# %%
import polars as pl

import fuzzyseq as fs

# %% [markdown]
# ## Part 1: Edit distances
#
# Lower is more similar. Bounded variants return `-1` as soon as the
# distance is known to exceed the threshold.

# %%
print(fs.levenshtein("kitten", "sitting"))  # 3
print(fs.damerau_levenshtein("ca", "abc"))  # 2, a transposition plus an insert
print(fs.hamming("karolin", "kathrin"))  # 3

bounded = fs.LevenshteinDistance(threshold=2)
print(bounded("kitten", "sitting"))  # -1

details = fs.levenshtein_detailed("fly", "ant")
print(details)  # Distance: 3, Insert: 0, Delete: 0, Substitute: 3

# %% [markdown]
# ## Part 2: Similarity scores
#
# Higher is more similar.

# %%
print(f"{fs.jaro_winkler_similarity('frog', 'fog'):.3f}")  # 0.925
print(fs.lcs_string("Hello World", "hello world"))  # 'ello orld'

dice = fs.IntersectionSimilarity(fs.characters_set)("night", "nacht")
print(dice.sorensen_dice_coefficient, f"{dice.jaccard_index:.3f}")

scorer = fs.FuzzyScore("en")
print(scorer.apply("Workshop", "wo"))  # 4

# %% [markdown]
# ## Part 3: Beyond strings
#
# Token lists, tuples and bytes work unchanged. Your own types plug in
# through `register_adapter`.

# %%
print(fs.levenshtein("the quick brown fox".split(), "the quick red fox".split()))  # 1
print(fs.lcs_length(b"GATTACA", b"TAGACCA"))


class Melody:
    def __init__(self, notes):
        self.notes = notes


fs.register_adapter(Melody, lambda m: m.notes)
print(fs.levenshtein(Melody(["C", "E", "G"]), Melody(["C", "F", "G"])))  # 1

# %% [markdown]
# ## Part 4: Batch search and polars

# %%
movies = ["The Godfather", "Pulp Fiction", "Fight Club", "Inception", "The Matrix"]
for match in fs.batch.best_matches(movies, "pulp ficton", algorithm="jaro_winkler", limit=2):
    print(f"  [{match.score:.0%}] {match.text}")

print(fs.batch.closest_match("matrx", movies))

queries = pl.Series("query", ["godfater", "incepshun"])
print(fs.polars_ext.best_match_series(queries, pl.Series(movies), algorithm="levenshtein"))
