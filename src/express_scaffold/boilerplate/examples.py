"""Example controller and model emitted when examples are requested."""

from __future__ import annotations

CONTROLLER_TS = """import type { Request, Response } from 'express';

// Example controller
export const getUsers = async (req: Request, res: Response) => {
  try {
    // Your logic here
    res.json({ message: 'Users fetched successfully' });
  } catch (error) {
    res.status(500).json({ error: (error as Error).message });
  }
};
"""

CONTROLLER_JS = """// Example controller
const getUsers = async (req, res) => {
  try {
    // Your logic here
    res.json({ message: 'Users fetched successfully' });
  } catch (error) {
    res.status(500).json({ error: error.message });
  }
};

module.exports = {
  getUsers
};
"""

MODEL_TS = """// Example model/interface
export interface User {
  id: string;
  name: string;
  email: string;
  createdAt: Date;
}

export class UserModel {
  constructor(
    public name: string,
    public email: string,
    public id: string = Date.now().toString(),
    public createdAt: Date = new Date()
  ) {}

  static findAll(): User[] {
    // Your database logic here
    return [];
  }

  save(): User {
    // Your save logic here
    return this;
  }
}
"""

MODEL_JS = """// Example model/schema
class User {
  constructor(name, email) {
    this.name = name;
    this.email = email;
    this.id = Date.now().toString();
    this.createdAt = new Date();
  }

  static findAll() {
    // Your database logic here
    return [];
  }

  save() {
    // Your save logic here
    return this;
  }
}

module.exports = User;
"""
