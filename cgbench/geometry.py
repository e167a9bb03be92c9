"""Process grid and global index layout of the 3D problem."""

from __future__ import annotations

from dataclasses import dataclass

from .optimal_shape import compute_optimal_shape


@dataclass(frozen=True)
class Geometry:
    """Local block sizes, process grid and this process's place in the global mesh."""

    size: int
    rank: int
    num_threads: int
    nx: int
    ny: int
    nz: int
    npx: int
    npy: int
    npz: int
    pz: int
    npartz: int
    partz_ids: tuple[int, ...]
    partz_nz: tuple[int, ...]
    ipx: int
    ipy: int
    ipz: int
    gnx: int
    gny: int
    gnz: int
    gix0: int
    giy0: int
    giz0: int


def generate_geometry(
    size: int,
    rank: int,
    num_threads: int,
    pz: int,
    zl: int,
    zu: int,
    nx: int,
    ny: int,
    nz: int,
    npx: int = 0,
    npy: int = 0,
    npz: int = 0,
) -> Geometry:
    """Build the geometry for ``rank`` out of ``size`` processes.

    If the given process grid is empty or larger than ``size``, a near-cubic
    one is computed. A non-zero ``pz`` splits the z layers of processes into
    a lower group of local depth ``zl`` and an upper group of depth ``zu``.
    """
    if npx * npy * npz <= 0 or npx * npy * npz > size:
        npx, npy, npz = compute_optimal_shape(size)

    if pz == 0:
        partz_ids: tuple[int, ...] = (npz,)
        partz_nz: tuple[int, ...] = (nz,)
    else:
        partz_ids = (pz, npz)
        partz_nz = (zl, zu)

    previous = 0
    for pid in partz_ids:
        if not previous < pid:
            raise ValueError(
                f"z partitioning {partz_ids} is inconsistent with the process grid depth {npz}"
            )
        previous = pid

    ipz = rank // (npx * npy)
    ipy = (rank - ipz * npx * npy) // npx
    ipx = rank % npx

    gnz = 0
    span = 0
    for pid, part_nz in zip(partz_ids, partz_nz):
        span = pid - span
        gnz += part_nz * span

    giz0 = 0
    boundary = 0
    for pid, part_nz in zip(partz_ids, partz_nz):
        if ipz < pid:
            giz0 += (ipz - boundary) * part_nz
            break
        boundary = pid
        giz0 += boundary * part_nz

    return Geometry(
        size=size,
        rank=rank,
        num_threads=num_threads,
        nx=nx,
        ny=ny,
        nz=nz,
        npx=npx,
        npy=npy,
        npz=npz,
        pz=pz,
        npartz=len(partz_ids),
        partz_ids=partz_ids,
        partz_nz=partz_nz,
        ipx=ipx,
        ipy=ipy,
        ipz=ipz,
        gnx=npx * nx,
        gny=npy * ny,
        gnz=gnz,
        gix0=ipx * nx,
        giy0=ipy * ny,
        giz0=giz0,
    )