"""
Rotational Motion Service.

Angular rates, the constant-angular-acceleration equations, torque,
moment of inertia of a point mass, rotational work, power and energy,
angular momentum and angular impulse. Angles are in radians.
"""

import math

from formulas.core import Param, formula
from formulas.services import FormulaService


TIME_INTERVAL = "Time interval (deltaT)"


@formula("angular-velocity", "omega = deltaTheta / deltaT",
         Param("deltaTheta"),
         Param("deltaT", TIME_INTERVAL, non_zero=True))
def angular_velocity(deltaTheta, deltaT):
    return deltaTheta / deltaT


@formula("angular-acceleration", "alpha = deltaOmega / deltaT",
         Param("deltaOmega"),
         Param("deltaT", TIME_INTERVAL, non_zero=True))
def angular_acceleration(deltaOmega, deltaT):
    return deltaOmega / deltaT


@formula("rotation-omega", "omega = omega0 + alpha*t",
         Param("omega0"), Param("alpha"), Param("t"))
def rotation_omega(omega0, alpha, t):
    return omega0 + alpha * t


@formula("rotation-theta", "theta = theta0 + omega0*t + (1/2)*alpha*t^2",
         Param("theta0"), Param("omega0"), Param("t"), Param("alpha"))
def rotation_theta(theta0, omega0, t, alpha):
    return theta0 + omega0 * t + 0.5 * alpha * t * t


@formula("rotation-omega2", "omega^2 = omega0^2 + 2*alpha*(theta - theta0)",
         Param("omega0"), Param("alpha"), Param("theta"), Param("theta0"))
def rotation_omega2(omega0, alpha, theta, theta0):
    return omega0 * omega0 + 2 * alpha * (theta - theta0)


@formula("rotation-omega-avg", "omega_avg = (omega + omega0) / 2",
         Param("omega"), Param("omega0"))
def rotation_omega_avg(omega, omega0):
    return 0.5 * (omega + omega0)


@formula("torque", "tau = r * F * sin(theta)",
         Param("r", "Lever arm (r)", non_negative=True),
         Param("F"), Param("theta"))
def torque(r, F, theta):
    return r * F * math.sin(theta)


@formula("2nd-law-rotation", "tau = I * alpha",
         Param("I", "Moment of inertia (I)", non_negative=True),
         Param("alpha"))
def second_law_rotation(I, alpha):
    return I * alpha


@formula("moment-of-inertia", "I = m * r^2",
         Param("m", "Mass (m)", non_negative=True),
         Param("r", "Radius (r)", non_negative=True))
def moment_of_inertia(m, r):
    # point mass
    return m * r * r


@formula("rotational-work", "W = tau * deltaTheta",
         Param("tau"), Param("deltaTheta"))
def rotational_work(tau, deltaTheta):
    return tau * deltaTheta


@formula("rotational-power", "P = tau * omega * cos(theta)",
         Param("tau"), Param("omega"), Param("theta"))
def rotational_power(tau, omega, theta):
    return tau * omega * math.cos(theta)


@formula("rotational-ke", "K = (1/2) * I * omega^2",
         Param("I", "Moment of inertia (I)", non_negative=True),
         Param("omega"))
def rotational_ke(I, omega):
    return 0.5 * I * omega * omega


@formula("angular-momentum", "L = m * r * v * sin(theta)",
         Param("m", "Mass (m)", non_negative=True),
         Param("r", "Radius (r)", non_negative=True),
         Param("v"), Param("theta"))
def angular_momentum(m, r, v, theta):
    return m * r * v * math.sin(theta)


@formula("angular-impulse", "H = tau * deltaT",
         Param("tau"),
         Param("deltaT", TIME_INTERVAL, non_negative=True))
def angular_impulse(tau, deltaT):
    return tau * deltaT


class RotationalMotionService(FormulaService):

    id = "rotational_motion"
    name = "Rotational Motion"
    description = "Angular kinematics, torque, rotational energy and momentum"
    formulas = (
        angular_velocity,
        angular_acceleration,
        rotation_omega,
        rotation_theta,
        rotation_omega2,
        rotation_omega_avg,
        torque,
        second_law_rotation,
        moment_of_inertia,
        rotational_work,
        rotational_power,
        rotational_ke,
        angular_momentum,
        angular_impulse,
    )
