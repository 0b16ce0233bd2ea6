"""Generation of a rust-project.json file describing every exercise."""

from __future__ import annotations

import json
import os
import subprocess
from dataclasses import asdict, dataclass, field
from pathlib import Path


@dataclass
class Crate:
    """One crate entry of rust-project.json."""

    root_module: str
    edition: str = "2021"
    deps: list[str] = field(default_factory=list)
    # Lets rust-analyzer work inside #[test] blocks.
    cfg: list[str] = field(default_factory=lambda: ["test"])


@dataclass
class RustAnalyzerProject:
    """Contents of rust-project.json."""

    sysroot_src: str = ""
    crates: list[Crate] = field(default_factory=list)

    def add_path(self, path: str) -> None:
        """Add a crate when the path's extension is rs."""
        _, dot, ext = path.partition(".")
        if dot and ext == "rs":
            self.crates.append(Crate(root_module=path))

    def exercises_to_json(self, root: str | os.PathLike = "exercises") -> None:
        """Add a crate for every .rs file below root."""
        for path in sorted(Path(root).glob("**/*")):
            self.add_path(str(path))

    def find_sysroot_src(self) -> None:
        """Ask rustc for the default toolchain and record its library source."""
        result = subprocess.run(
            ["rustc", "--print", "sysroot"], capture_output=True, check=False
        )
        text = (result.stdout or b"").decode("utf-8", errors="replace")
        words = text.split()
        toolchain = words[0] if words else text
        print(f"Determined toolchain: {toolchain}\n")
        self.sysroot_src = str(
            Path(toolchain) / "lib" / "rustlib" / "src" / "rust" / "library"
        )

    def to_json(self) -> str:
        """Serialise the project compactly."""
        return json.dumps(
            {
                "sysroot_src": self.sysroot_src,
                "crates": [asdict(crate) for crate in self.crates],
            },
            separators=(",", ":"),
            ensure_ascii=False,
        )

    def write_to_disk(self, path: str | os.PathLike = "rust-project.json") -> None:
        """Write the project file."""
        Path(path).write_text(self.to_json(), encoding="utf-8")