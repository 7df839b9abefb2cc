"""Capture bornée de la sortie d'une commande pour le rapport HTML.

Ce module définit :
    - StreamTag : origine d'un fragment (stdout ou stderr).
    - CaptureBuffer : accumulateur HTML borné, partagé par les deux flux.
    - CaptureSink : point d'écriture d'un flux vers le buffer.

La limite est vérifiée avant chaque fragment : un fragment accepté
juste sous la limite est ajouté en entier, la taille finale peut donc
dépasser MAX_CAPTURE_BYTES d'au plus un fragment. Une fois la limite
atteinte, les fragments suivants sont ignorés et l'indicateur
``truncated`` reste positionné.

Example:
    Capture de deux flux dans un même buffer :

        buffer = CaptureBuffer()
        out = CaptureSink(buffer, StreamTag.STDOUT)
        err = CaptureSink(buffer, StreamTag.STDERR)
        out.write(b"ok\\n")
        err.write(b"<warn>\\n")
        out.close()
        err.close()
        buffer.content()
        # '<span class="stdout">ok\\n</span><span class="stderr">&lt;warn&gt;\\n</span>'
"""

import codecs
import html
import threading
from enum import StrEnum
from typing import List

MAX_CAPTURE_BYTES = 1_000_000


class StreamTag(StrEnum):
    """Origine d'un fragment capturé.

    La valeur est la classe CSS utilisée dans le rapport.
    """

    STDOUT = "stdout"
    STDERR = "stderr"

    @property
    def open_tag(self) -> str:
        """Balise ouvrante entourant un fragment de ce flux."""
        return f'<span class="{self.value}">'

    @property
    def close_tag(self) -> str:
        """Balise fermante d'un fragment."""
        return "</span>"


class CaptureBuffer:
    """Accumulateur HTML borné, sûr en accès concurrent.

    La taille est comptée en octets UTF-8 du contenu rendu
    (échappé et balisé), avant la conversion des retours à la ligne.

    Attributes:
        _capacity: Taille maximale nominale en octets.
        _chunks: Fragments rendus, dans l'ordre d'écriture.
        _size: Taille courante en octets.
        _truncated: True dès que la limite a été atteinte.
        _lock: Verrou protégeant le test de taille et l'ajout.
    """

    def __init__(self, capacity: int = MAX_CAPTURE_BYTES) -> None:
        """Initialise un buffer vide.

        Args:
            capacity: Taille maximale nominale en octets.

        Raises:
            ValueError: Si capacity n'est pas strictement positive.
        """
        if capacity <= 0:
            raise ValueError(f"capacity invalide : {capacity}")
        self._capacity = capacity
        self._chunks: List[str] = []
        self._size = 0
        self._truncated = False
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def size(self) -> int:
        """Taille courante du contenu rendu en octets."""
        with self._lock:
            return self._size

    @property
    def truncated(self) -> bool:
        """True si une partie de la sortie a pu être perdue."""
        with self._lock:
            return self._truncated

    def append(self, tag: StreamTag, text: str) -> bool:
        """Échappe, balise et ajoute un fragment de texte.

        Args:
            tag: Flux d'origine du fragment.
            text: Texte brut décodé.

        Returns:
            True si le fragment a été conservé, False s'il a été
            ignoré parce que la limite était déjà atteinte.
        """
        if not text:
            return True
        rendered = f"{tag.open_tag}{html.escape(text)}{tag.close_tag}"
        with self._lock:
            if self._size >= self._capacity:
                self._truncated = True
                return False
            self._chunks.append(rendered)
            self._size += len(rendered.encode("utf-8"))
            if self._size >= self._capacity:
                self._truncated = True
            return True

    def content(self) -> str:
        """Retourne le contenu rendu concaténé.

        Returns:
            Fragments échappés et balisés dans l'ordre d'écriture.
        """
        with self._lock:
            return "".join(self._chunks)


class CaptureSink:
    """Point d'écriture d'un flux vers un CaptureBuffer.

    ``write`` n'a aucun mode d'échec : il rapporte toujours la
    totalité des octets comme écrits, que le fragment ait été
    conservé ou ignoré. Le décodage UTF-8 est incrémental afin
    qu'un caractère multi-octets coupé entre deux lectures ne soit
    pas altéré ; les octets invalides sont remplacés.

    Attributes:
        _buffer: Buffer partagé.
        _tag: Flux représenté par ce sink.
        _decoder: Décodeur UTF-8 incrémental propre au flux.
    """

    def __init__(self, buffer: CaptureBuffer, tag: StreamTag) -> None:
        self._buffer = buffer
        self._tag = tag
        self._decoder = codecs.getincrementaldecoder("utf-8")(
            errors="replace"
        )

    @property
    def tag(self) -> StreamTag:
        return self._tag

    def write(self, data: bytes) -> int:
        """Transmet un fragment brut au buffer.

        Args:
            data: Octets lus sur le flux de la commande.

        Returns:
            len(data), toujours.
        """
        self._buffer.append(self._tag, self._decoder.decode(data))
        return len(data)

    def close(self) -> None:
        """Vide le décodeur (octets incomplets en fin de flux)."""
        self._buffer.append(self._tag, self._decoder.decode(b"", final=True))
