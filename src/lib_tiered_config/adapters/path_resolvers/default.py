"""Candidate path expansion for tiered configuration directories.

Purpose
-------
Implement the :class:`lib_tiered_config.application.ports.PathResolver`
protocol. The adapter is the only component that knows how tiers and suffixes
combine into file names; it never touches the filesystem.

Contents
--------
* :class:`TieredPathResolver` – expands a logical config name into its chain.

System Role
-----------
Feeds deterministic path lists into :func:`lib_tiered_config.core.create_config_loader`.
Missing candidates are expected; the file loader turns them into empty
mappings.
"""

from __future__ import annotations

from ...domain.options import LoaderParams
from ...observability import log_debug, make_event


class TieredPathResolver:
    """Expand ``name`` into ``[base, env, priority] x extensions`` candidate paths.

    Why
    ----
    The resulting order is exactly the merge order, so keeping it in one place
    makes precedence auditable: for each tier in ascending priority, one path
    per extension in ascending priority.

    Examples
    --------
    >>> resolver = TieredPathResolver(LoaderParams(dir="./config", env="test", sorted_extension=("json", "yaml")))
    >>> resolver.chain("pg")
    ['./config/base/pg.json', './config/base/pg.yaml', './config/test/pg.json', './config/test/pg.yaml', './config/local/pg.json', './config/local/pg.yaml']
    """

    def __init__(self, params: LoaderParams) -> None:
        """Store the directory layout shared by every chain.

        Parameters
        ----------
        params:
            Root directory, environment name, tier names and suffix order.
        """

        self.params = params

    def chain(self, name: str) -> list[str]:
        """Return candidate paths for *name*, lowest priority first.

        Segments are joined with ``/`` as given, so an absolute-looking *name*
        or tier still lands under ``dir``.

        Side Effects
        ------------
        Emits a ``config_chain_built`` debug event with the candidate count.
        """

        stems = ["/".join((self.params.dir, tier, name)) for tier in self.params.tiers]
        paths = [f"{stem}.{extension}" for stem in stems for extension in self.params.sorted_extension]
        log_debug("config_chain_built", **make_event(name, None, {"candidates": len(paths)}))
        return paths
