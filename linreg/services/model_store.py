"""Plain-text persistence of fitted models.

A model file holds exactly two space-delimited lines::

    <label_x> <label_y>
    <theta0> <theta1>
"""

from pathlib import Path

from loguru import logger

from linreg.core.errors import DataIOError, DataParseError
from linreg.core.modeling.model import Model, Theta


class ModelStore:
    """Reads and writes models in the two-line text format."""

    def dumps(self, model: Model) -> str:
        """Serializes a model.

        Floats are written with ``repr`` so that they parse back to the exact
        same value.

        Raises:
            DataParseError: If a label is empty or contains whitespace.
        """
        self.check_labels(model.labels)
        label_x, label_y = model.labels
        theta0, theta1 = model.theta
        return f"{label_x} {label_y}\n{float(theta0)!r} {float(theta1)!r}\n"

    def check_labels(self, labels: tuple[str, str], source: str = "<model>") -> None:
        """Raises DataParseError if a label cannot be written to a model file."""
        for label in labels:
            if not label or any(ch.isspace() for ch in label):
                raise DataParseError(
                    source, f"label {label!r} cannot be stored in a space-delimited model file"
                )

    def loads(self, text: str, source: str = "<string>") -> Model:
        """Parses a model from its serialized form.

        Raises:
            DataParseError: If a line or field is missing, a value is not a
                float, or non-blank content follows the theta line.
        """
        lines = text.splitlines()
        label_fields = self._fields(lines, 0, source, "labels")
        theta_fields = self._fields(lines, 1, source, "theta")

        for number, line in enumerate(lines[2:], start=3):
            if line.strip():
                raise DataParseError(source, "unexpected content after the theta line", number)

        values = []
        for name, raw in zip(("theta0", "theta1"), theta_fields):
            try:
                values.append(float(raw))
            except ValueError:
                raise DataParseError(source, f"failed to parse {name} from '{raw}'", 2) from None

        return Model(labels=(label_fields[0], label_fields[1]), theta=Theta(*values))

    def save(self, model: Model, path: str | Path) -> Path:
        """Writes a model to ``path``, creating parent directories.

        Raises:
            DataIOError: If the file cannot be written.
            DataParseError: If a label cannot be represented.
        """
        path = Path(path)
        contents = self.dumps(model)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(contents, encoding="utf-8")
        except OSError as exc:
            raise DataIOError(path, str(exc)) from exc
        logger.info(f"Model saved to {path}")
        return path

    def load(self, path: str | Path) -> Model:
        """Reads a model from ``path``.

        Raises:
            DataIOError: If the file cannot be read.
            DataParseError: If the contents are malformed.
        """
        path = Path(path)
        try:
            contents = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DataIOError(path, str(exc)) from exc
        return self.loads(contents, source=str(path))

    def _fields(self, lines: list[str], index: int, source: str, what: str) -> list[str]:
        if len(lines) <= index:
            raise DataParseError(source, f"missing {what} line", index + 1)
        fields = lines[index].split()
        if len(fields) != 2:
            raise DataParseError(
                source, f"expected 2 {what} fields, got {len(fields)}", index + 1
            )
        return fields
