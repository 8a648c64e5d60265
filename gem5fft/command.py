import shlex


def build_command(config, derived, outdir, settings):
    """Build the gem5 argv for one FFT run."""
    cmd = [
        settings.gem5_bin,
        f"--outdir={outdir}",
        settings.se_config,
        f"--cpu-type={config.cpu_type}",
        f"--num-cpus={config.cpus}",
        f"--cpu-clock={config.clock}",
        f"--mem-size={config.mem_size}",
        "--caches",
        "--l2cache",
        f"--l1i_size={config.l1i_size}",
        f"--l1d_size={config.l1d_size}",
        f"--l2_size={config.l2_size}",
        f"--l1i_assoc={config.l1i_assoc}",
        f"--l1d_assoc={config.l1d_assoc}",
        f"--l2_assoc={config.l2_assoc}",
        f"--cacheline_size={config.cacheline_size}",
        "--ruby",
        "--network=garnet2.0",
        f"--topology={config.topology}",
        f"--mesh-rows={config.rows}",
        f"--num-dirs={derived.num_dirs}",
        f"--routing-algorithm={config.routing_algorithm}",
        f"--vcs-per-vnet={config.vcs_per_vnet}",
        f"--buffers-per-data-vc={config.buffers_per_data_vc}",
        f"--buffers-per-ctrl-vc={config.buffers_per_ctrl_vc}",
        f"--link-width-bits={config.link_width_bits}",
        f"--garnet-deadlock-threshold={config.deadlock_threshold}",
    ]
    if derived.escape_vc:
        cmd.append("--escape-vc")
    if derived.conc_flags:
        cmd.extend(shlex.split(derived.conc_flags))
    cmd += [
        f"--cmd={settings.fft_bin}",
        f"--options=-m{config.problem_size} -p{config.cpus}",
    ]
    return cmd


def format_command(cmd):
    return " ".join(shlex.quote(c) for c in cmd)
