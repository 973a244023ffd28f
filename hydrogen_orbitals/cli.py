"""
Command Line Interface

Describe orbitals, print sampled wave function values, and summarize the
orbitals listed in a JSON or YAML selection file.
"""

import logging

import click
import numpy as np

from .config import ConfigError, load_orbitals
from .hydrogen_wavefunctions import (
    probability_density,
    radial_probability_density,
    radial_wavefunction,
    spherical_harmonic,
    wave_function,
)
from .orbital_descriptors import describe_orbital
from .quantum_constants import InvalidQuantumNumbers, get_orbital_extent


def _describe_or_fail(n, l, m):
    try:
        return describe_orbital(n, l, m)
    except InvalidQuantumNumbers as e:
        raise click.BadParameter(str(e)) from e


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.argument("n", type=int)
@click.argument("l", type=int)
@click.argument("m", type=int)
def describe(n: int, l: int, m: int) -> None:
    """Print name, energy, nodes and equations of orbital (N, L, M)."""
    orbital = _describe_or_fail(n, l, m)

    click.echo(f"{orbital.name} orbital (n={n}, l={l}, m={m})")
    click.echo(f"  Energy:        {orbital.energy_ev:.2f} eV")
    click.echo(f"  Radial nodes:  {orbital.radial_nodes}")
    click.echo(f"  Angular nodes: {orbital.angular_nodes}")
    click.echo(f"  ψ: {orbital.wave_function_equation}")
    click.echo(f"  R: {orbital.radial_function_equation}")
    click.echo(f"  Y: {orbital.angular_function_equation}")


@cli.command()
@click.argument("n", type=int)
@click.argument("l", type=int)
@click.argument("m", type=int)
@click.option("--r-max", type=float, default=None, help="Largest radius to sample (Bohr radii). Defaults to the orbital extent.")
@click.option("--step", type=float, default=2.0, show_default=True, help="Radial step (Bohr radii).")
def probe(n: int, l: int, m: int, r_max: float | None, step: float) -> None:
    """Print sampled radial, angular and full wave function values."""
    orbital = _describe_or_fail(n, l, m)
    if step <= 0:
        raise click.BadParameter("step must be positive", param_hint="--step")
    if r_max is None:
        r_max = get_orbital_extent(n)

    click.echo(f"=== {orbital.name}: n={n}, l={l}, m={m} ===")

    click.echo("Radial function values:")
    for r in np.arange(0.5, r_max + 1e-9, step):
        R_nl = radial_wavefunction(r, n, l)
        density = radial_probability_density(r, n, l)
        click.echo(f"  r={r:5.1f}: R_nl={R_nl:+.6f}, P(r)={density:.6f}")

    click.echo("Spherical harmonic values (φ=0):")
    for theta in np.linspace(0.0, np.pi, 5):
        Y_lm = spherical_harmonic(theta, 0.0, l, m)
        click.echo(f"  θ={np.degrees(theta):5.0f}°: Y_lm={Y_lm:+.6f}")

    click.echo("Wave function values (θ=π/2, φ=0):")
    for r in np.arange(1.0, min(r_max, 10.0) + 1e-9, 3.0):
        psi = wave_function(r, np.pi / 2, 0.0, n, l, m)
        density = probability_density(r, np.pi / 2, 0.0, n, l, m)
        click.echo(f"  r={r:4.1f}: ψ={psi:+.6f}, |ψ|²={density:.6f}")


@cli.command()
@click.option(
    "--config",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="JSON or YAML file with an 'orbitals' list of [n, l, m] triples.",
)
def table(config: str) -> None:
    """Print one summary line per orbital listed in a config file."""
    try:
        orbitals = load_orbitals(config)
    except (ConfigError, InvalidQuantumNumbers) as e:
        raise click.ClickException(str(e)) from e

    for n, l, m in orbitals:
        orbital = describe_orbital(n, l, m)
        click.echo(
            f"{orbital.name:<10} n={n} l={l} m={m:+d}  "
            f"E={orbital.energy_ev:8.3f} eV  "
            f"radial nodes={orbital.radial_nodes}  angular nodes={orbital.angular_nodes}"
        )
