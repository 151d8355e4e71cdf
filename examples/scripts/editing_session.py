from neuronlayout import (
    Category,
    LayoutConfig,
    ToggleCategory,
)

SEED = """
metadata:
  source: editing_session.py
grid:
  rows: 4
  cols: 6
active: [1, 8]
inhibitory: [8, 15]
probed: [20]
"""

GLYPHS = {
    Category.OTHER: ".",
    Category.INHIBITORY: "I",
    Category.ACTIVE: "A",
    Category.OVERLAP: "X",
}


def draw(grid, state):
    cmap = grid.category_map(state)
    probes = grid.probe_mask(state)
    for y in range(grid.rows):
        row = []
        for x in range(grid.cols):
            glyph = GLYPHS[Category(int(cmap[y, x]))]
            row.append(glyph.lower() if probes[y, x] else glyph)
        print(" ".join(row))
    print()


def main():
    # Seed from a loaded layout; index 8 starts out overlapping
    config = LayoutConfig.from_yaml(SEED)
    grid = config.grid.to_grid()
    state = config.build()
    state.subscribe(lambda change: print(change.message))
    draw(grid, state)

    # Paint a few cells the way the canvas would on mouse clicks
    for mode, (x, y) in [
        (ToggleCategory.ACTIVE, (2, 1)),  # overlap resolved to inhibitory
        (ToggleCategory.INHIBITORY, (1, 0)),  # active stolen into inhibitory
        (ToggleCategory.PROBED, (5, 3)),
        (ToggleCategory.ACTIVE, (3, 3)),
    ]:
        state.toggle(mode, grid.index_of(x, y))
    draw(grid, state)

    print(LayoutConfig.from_classification(state, grid=config.grid).to_yaml())


if __name__ == "__main__":
    main()
