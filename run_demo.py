"""Demo script: fly a bouncing shot and show the bounce timeline."""
from cricket_sim.config import create_config
from cricket_sim.main import run_simulation
from cricket_sim.predictor import predict

config = create_config(angle=35.0, speed=30.0, gravity=9.8, restitution=0.6)
preview = predict(config)

final_state, log, reason = run_simulation(config, dt=1.0 / 60.0, verbose=False)

print("\n===== PREVIEW (first arc) =====")
print(f"Apex: x={preview.apex[0]:.1f} m, height={preview.apex_height:.1f} m "
      f"at t={preview.time_to_apex:.2f} s")
print(f"Back at bat height: x={preview.landing_x:.1f} m at t={preview.total_time:.2f} s")

print("\n===== BOUNCE TIMELINE =====")
for i in log.bounce_indices():
    print(f"  t={log.time[i]:7.2f}s | x={log.position_x[i]:7.2f} m | "
          f"rebound Vy={log.velocity_y[i]:6.2f} m/s | bounce #{log.bounce_count[i]}")

print()
print(f"Result: {reason}")
print(f"Final position: x={final_state.x:.2f} m, y={final_state.y:.3f} m")
print(f"Max height: {max(log.max_height):.2f} m above bat")
