"""Regenerate the Cayley table for PGA(2,0,1) from blade algebra and diff it against the library."""
import torch

from pga_axioms.pga.algebra import CAYLEY_SIGNS, CAYLEY_INDICES

# Index: 0:s, 1:e0, 2:e1, 3:e2, 4:e01, 5:e20, 6:e12, 7:e012
#
# Each blade is the ordered product of its generators, so e20 is stored
# as (2, 0) meaning e2∧e0
index_to_blade = {
    0: (),           # scalar
    1: (0,),         # e0
    2: (1,),         # e1
    3: (2,),         # e2
    4: (0, 1),       # e01
    5: (2, 0),       # e20 (NOT e02!)
    6: (1, 2),       # e12
    7: (0, 1, 2),    # e012
}

# Metric: e0^2 = 0, e1^2 = e2^2 = 1
metric = {0: 0, 1: 1, 2: 1}

N = len(index_to_blade)


def canonical_blade(blade):
    """Sort a blade's generators, returning (sorted_blade, permutation sign)."""
    blade = list(blade)
    sign = 1
    for i in range(len(blade)):
        for j in range(len(blade) - 1 - i):
            if blade[j] > blade[j + 1]:
                blade[j], blade[j + 1] = blade[j + 1], blade[j]
                sign *= -1
    return tuple(blade), sign


def multiply_blades(a, b):
    """Multiply two blades, returning (result_blade, sign).

    Adjacent generators are swapped into ascending order (each swap flips
    the sign) and equal neighbours are contracted with the metric. A zero
    sign means the product vanishes.
    """
    combined = list(a) + list(b)
    sign = 1

    changed = True
    while changed:
        changed = False
        i = 0
        while i < len(combined) - 1:
            if combined[i] == combined[i + 1]:
                m = metric[combined[i]]
                if m == 0:
                    return (), 0
                sign *= m
                del combined[i:i + 2]
                changed = True
            elif combined[i] > combined[i + 1]:
                combined[i], combined[i + 1] = combined[i + 1], combined[i]
                sign *= -1
                changed = True
                i += 1
            else:
                i += 1

    return tuple(combined), sign


def build_table():
    """Compute (signs, indices) for every product e_i * e_j."""
    blade_to_index = {}
    for idx, blade in index_to_blade.items():
        canonical, sign = canonical_blade(blade)
        blade_to_index[canonical] = (idx, sign)

    signs = torch.zeros(N, N, dtype=torch.float32)
    indices = torch.zeros(N, N, dtype=torch.long)

    for i in range(N):
        for j in range(N):
            result_blade, sign = multiply_blades(index_to_blade[i], index_to_blade[j])
            if sign == 0:
                continue
            canonical, canonical_sign = canonical_blade(result_blade)
            result_idx, idx_sign = blade_to_index[canonical]
            signs[i, j] = sign * canonical_sign * idx_sign
            indices[i, j] = result_idx

    return signs, indices


def main():
    signs, indices = build_table()

    errors = []
    for i in range(N):
        for j in range(N):
            old_sign = CAYLEY_SIGNS[i, j].item()
            new_sign = signs[i, j].item()
            # Result index is meaningless when the product vanishes
            same_idx = new_sign == 0 or CAYLEY_INDICES[i, j].item() == indices[i, j].item()
            if old_sign != new_sign or not same_idx:
                errors.append((i, j, old_sign, CAYLEY_INDICES[i, j].item(), new_sign, indices[i, j].item()))

    print(f"Found {len(errors)} discrepancies:")
    for i, j, old_s, old_idx, new_s, new_idx in errors:
        print(f"  ({i}, {j}): blade{index_to_blade[i]} * blade{index_to_blade[j]}")
        print(f"    TABLE:    sign={old_s}, idx={old_idx}")
        print(f"    EXPECTED: sign={new_s}, idx={new_idx}")

    print("\n\n# Products list for algebra.py:")
    print("products = [")
    for i in range(N):
        items = [f"({i}, {j}, {int(signs[i, j].item())}, {int(indices[i, j].item())})" for j in range(N)]
        for k in range(0, N, 4):
            print("    " + ", ".join(items[k:k + 4]) + ",")
    print("]")


if __name__ == "__main__":
    main()
